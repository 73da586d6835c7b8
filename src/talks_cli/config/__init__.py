"""
Configuration package for Talks CLI.

This package contains the environment-driven settings of the client.
"""

__all__ = ["settings"]
