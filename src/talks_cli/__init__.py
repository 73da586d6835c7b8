"""
Talks CLI - a command-line client for the talks registry.

This package lists the talks currently scheduled on the registry and
submits new talks to it.
"""

__version__ = "0.1.0"
__license__ = "Apache-2.0"

from typing import Final

# Package metadata
VERSION: Final[str] = __version__
PACKAGE_NAME: Final[str] = "talks-cli"
USER_AGENT: Final[str] = f"{PACKAGE_NAME}/{VERSION}"

__all__ = [
    "__version__",
    "VERSION",
    "PACKAGE_NAME",
    "USER_AGENT",
]
