"""Structured logging utilities for the WAVE client.

Uses structlog for structured logging with Rich for console output. The
library itself only calls ``get_logger``; applications decide whether and
how to call ``setup_logging``.
"""

import logging
from typing import Any, Dict
from datetime import datetime, timezone

import structlog
from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme
from rich.style import Style


# Styles for the WAVE categories
WAVE_THEME = Theme({
    "info": Style(color="cyan"),
    "warning": Style(color="yellow", bold=True),
    "error": Style(color="red", bold=True),
    "success": Style(color="green", bold=True),
    "alert": Style(color="yellow"),
    "feature": Style(color="green"),
    "structure": Style(color="blue"),
    "aria": Style(color="magenta"),
    "contrast": Style(color="red"),
    "endpoint": Style(color="cyan", italic=True),
})

console = Console(theme=WAVE_THEME)


def add_timestamp(
    logger: logging.Logger,
    method_name: str,
    event_dict: Dict[str, Any]
) -> Dict[str, Any]:
    """Add ISO timestamp to log events."""
    event_dict["timestamp"] = datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")
    return event_dict


def add_log_level(
    logger: logging.Logger,
    method_name: str,
    event_dict: Dict[str, Any]
) -> Dict[str, Any]:
    """Add log level to event dict."""
    event_dict["level"] = method_name.upper()
    return event_dict


def setup_logging(level: str = "INFO", quiet: bool = False) -> structlog.stdlib.BoundLogger:
    """Configure structured logging for the application.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        quiet: If True, discard log output

    Returns:
        Configured structlog logger
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    if quiet:
        handler: logging.Handler = logging.NullHandler()
    else:
        handler = RichHandler(
            console=console,
            show_time=True,
            show_path=False,
            rich_tracebacks=True,
            markup=False,
        )
    handler.setLevel(log_level)

    logging.basicConfig(
        level=log_level,
        handlers=[handler],
        force=True,
    )

    processors = [
        structlog.stdlib.filter_by_level,
        add_timestamp,
        add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
        structlog.dev.ConsoleRenderer(
            colors=True,
            exception_formatter=structlog.dev.plain_traceback,
        ),
    ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    return structlog.get_logger("wave_client")


def get_logger(name: str = "wave_client") -> structlog.stdlib.BoundLogger:
    """Get a logger instance with the given name.

    Args:
        name: Logger name (usually module name)

    Returns:
        structlog logger, configured or not
    """
    return structlog.get_logger(name)
