"""Utility modules for the WAVE client."""

from .logging import (
    setup_logging,
    get_logger,
    console,
)

__all__ = [
    # Logging
    "setup_logging",
    "get_logger",
    "console",
]
