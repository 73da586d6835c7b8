"""
Structured error system for the Talks CLI registry client.

Every failure that ends a command is raised as a ``TalksError`` subclass
so the CLI can report it uniformly. Each subclass carries a stable ``code``
and a default message; instances add the HTTP status and free-form details
where they are known.
"""

from typing import Any, Dict, List, Optional
import asyncio
import logging

import aiohttp

logger = logging.getLogger(__name__)


class TalksError(Exception):
    """Base exception for all registry related errors."""

    code = "TALKS_ERROR"
    default_message = "Talks registry error"

    def __init__(
        self,
        message: Optional[str] = None,
        *,
        status: Optional[int] = None,
        original_error: Optional[Exception] = None,
        **details: Any
    ):
        self.message = message or self.default_message
        super().__init__(self.message)
        self.status = status
        self.original_error = original_error
        self.details: Dict[str, Any] = {k: v for k, v in details.items() if v is not None}

    def to_dict(self) -> Dict[str, Any]:
        """Structured form used for debug logging."""
        data: Dict[str, Any] = {"type": type(self).__name__, "code": self.code, "message": self.message}
        if self.status is not None:
            data["status"] = self.status
        if self.details:
            data["details"] = dict(self.details)
        return data

    def __str__(self) -> str:
        if self.status is None:
            return self.message
        return f"{self.message} (HTTP {self.status})"


class NetworkError(TalksError):
    """The registry could not be reached."""
    code = "NETWORK_ERROR"
    default_message = "Could not reach the talks registry"


class TimeoutError(TalksError):
    """A request took longer than the configured timeout."""
    code = "TIMEOUT_ERROR"
    default_message = "Request to the talks registry timed out"


class DecodeError(TalksError):
    """A response body is not the expected talk payload."""
    code = "DECODE_ERROR"
    default_message = "Could not decode the registry response"


class ServerError(TalksError):
    """The registry answered with a non-2xx status."""
    code = "SERVER_ERROR"
    default_message = "The talks registry rejected the request"


class MissingFieldError(TalksError):
    """A required submission field is empty."""
    code = "MISSING_FIELD"
    default_message = "One of the three fields is null"

    def __init__(self, fields: Optional[List[str]] = None, **kwargs: Any):
        super().__init__(fields=fields or None, **kwargs)


def classify_error(error: Exception) -> TalksError:
    """
    Map a transport or parsing exception onto the TalksError hierarchy.

    Args:
        error: The original exception

    Returns:
        Classified TalksError instance
    """
    if isinstance(error, TalksError):
        return error

    if isinstance(error, asyncio.TimeoutError):
        return TimeoutError(original_error=error)

    if isinstance(error, (aiohttp.ClientError, OSError)):
        return NetworkError(f"Could not reach the talks registry: {error}", original_error=error)

    if isinstance(error, ValueError):
        return DecodeError(f"Could not decode the registry response: {error}", original_error=error)

    logger.debug(f"Unclassified error {type(error).__name__}: {error}")
    return TalksError(str(error) or type(error).__name__, original_error=error)
