"""
Configuration settings for Talks CLI.

This module provides configuration management using Pydantic settings.
Every value has a compiled-in default, so the client works with no
environment at all; environment variables only override the defaults.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_BASE_URL = "http://talks.cosi.clarkson.edu"


class TalksCliSettings(BaseSettings):
    """
    Main configuration settings for Talks CLI.

    Settings are loaded from multiple sources in order of preference:
    1. Explicit keyword arguments
    2. Environment variables (prefixed with TALKS_CLI_)
    3. Default values
    """

    model_config = SettingsConfigDict(
        env_prefix="TALKS_CLI_",
        case_sensitive=False,
        extra="ignore",
    )

    # Registry Configuration
    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        description="Base URL of the talks registry"
    )

    timeout: float = Field(
        default=30.0,
        description="Request timeout in seconds",
        gt=0
    )

    # Logging Configuration
    log_level: str = Field(
        default="WARNING",
        description="Logging level"
    )

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Validate the registry base URL and drop any trailing slash."""
        v = v.strip()
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"Invalid base URL '{v}'. It must start with http:// or https://")
        return v.rstrip("/")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Invalid log level '{v}'. Valid levels: {', '.join(sorted(valid_levels))}")
        return v_upper
