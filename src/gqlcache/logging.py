"""
Centralized logging configuration using structlog
"""

import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any

import structlog

# Context variable for the operation currently being read from the store
operation_name_ctx: ContextVar[str | None] = ContextVar("operation_name", default=None)


class OperationContextFilter:
    """Add operation context to log records."""

    def __call__(self, logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
        """Add operation context to the event dict."""
        # Suppress unused parameter warnings - these are required by structlog interface
        _ = logger, method_name

        operation_name = operation_name_ctx.get()
        if operation_name:
            event_dict["operation_name"] = operation_name

        return event_dict


def configure_logging(debug: bool = False, log_level: str | None = None) -> None:
    """Configure structlog with appropriate processors and formatters.

    Args:
        debug: If True, use human-readable console output. If False, use JSON.
        log_level: Explicit level name; defaults to DEBUG when debug is set, INFO otherwise.
    """

    # Determine log level
    if log_level is not None:
        level = logging.getLevelName(log_level.upper())
    else:
        level = logging.DEBUG if debug else logging.INFO

    # Configure stdlib logging
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(message)s",
        force=True,
    )

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        OperationContextFilter(),
        structlog.processors.TimeStamper(fmt="ISO", utc=True),
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if debug:
        # Development: human-readable console output
        processors.append(structlog.dev.ConsoleRenderer(colors=True))
    else:
        # Production: JSON output
        processors.append(structlog.processors.JSONRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        context_class=dict,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.BoundLogger:
    """Get a structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger
    """
    return structlog.get_logger(name)


@contextmanager
def operation_context(operation_name: str | None) -> Iterator[None]:
    """Tag every log event emitted inside the block with an operation name."""
    token = operation_name_ctx.set(operation_name)
    try:
        yield
    finally:
        operation_name_ctx.reset(token)


def get_operation_name() -> str | None:
    """Get the current operation name."""
    return operation_name_ctx.get()
