"""
CLI interface package for Talks CLI.

This package contains the Typer application and its command handlers.
"""

__all__ = ["app"]
