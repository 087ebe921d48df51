"""
Structured logging for the msgauth package.

Modules log through structlog wrappers around stdlib loggers in the ``msgauth``
namespace, so the host application's handlers and levels decide what is
emitted. ``configure_logging`` is the setup used by the ``msgauth`` command:
human-readable output in development, JSON elsewhere, always on stderr.
"""

import logging
import sys
from typing import cast

import structlog
from structlog.types import Processor

from msgauth.core.config import get_settings

LOGGER_NAMESPACE = "msgauth"


def configure_logging() -> None:
    """
    Configure structured logging for a process driven by msgauth.

    In development mode, logs are formatted for human readability.
    In staging and production, logs are JSON-formatted for log aggregation systems.
    Only the ``msgauth`` logger level is set; other loggers keep the host's levels.
    """
    settings = get_settings()

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if settings.environment == "development":
        processors = shared_processors + [structlog.dev.ConsoleRenderer(colors=True)]
    else:
        processors = shared_processors + [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # stdout carries command output
    logging.basicConfig(format="%(message)s", stream=sys.stderr)
    logging.getLogger(LOGGER_NAMESPACE).setLevel(settings.log_level)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger writing to the stdlib logger ``name``."""
    return cast(
        structlog.stdlib.BoundLogger,
        structlog.wrap_logger(logging.getLogger(name), wrapper_class=structlog.stdlib.BoundLogger),
    )
