"""
Services package for Talks CLI.

Command-level operations built on top of the registry client.
"""

from .talks import (
    SubmitOptions,
    SubmitResult,
    list_talks,
    render_talks,
    submit_talk,
)

__all__ = [
    "SubmitOptions",
    "SubmitResult",
    "list_talks",
    "render_talks",
    "submit_talk",
]
