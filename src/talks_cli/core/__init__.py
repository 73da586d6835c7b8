"""
Core components for Talks CLI.

This module provides the talk record codec and the HTTP client used to
talk to the registry.
"""

__all__ = ["client", "errors", "models"]
