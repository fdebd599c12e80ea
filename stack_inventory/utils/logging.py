"""Logging configuration.

The library itself only emits events through structlog loggers obtained with
:func:`get_logger`; hosts that want to see them call :func:`configure_logging`
once at startup (or wire structlog into their own setup).
"""

import logging
import os
import sys
from typing import Any

import structlog

LOG_LEVEL_ENV = "STACK_INVENTORY_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"


def get_log_level() -> str:
    """Get log level from the environment."""
    return os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper()


def setup_stdlib_logging(level: str) -> None:
    """Route the package's stdlib logger to stderr at ``level``."""
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)

    package_logger = logging.getLogger("stack_inventory")
    package_logger.setLevel(level)
    package_logger.handlers = [handler]


def setup_structlog(json_output: bool = False) -> None:
    """Configure structlog for structured logging."""
    processors: list[Any] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.contextvars.merge_contextvars,
    ]

    if json_output:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def configure_logging(level: str | None = None, json_output: bool = False) -> None:
    """Configure all logging for the package."""
    setup_stdlib_logging(level or get_log_level())
    setup_structlog(json_output=json_output)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a logger backed by the stdlib logger ``name``.

    Events go through stdlib level filtering, so nothing below WARNING is
    emitted until the host configures logging.
    """
    return structlog.wrap_logger(
        logging.getLogger(name), wrapper_class=structlog.stdlib.BoundLogger
    )
