"""Logging configuration.

structlog on top of the standard library. Everything goes to stderr so
command output on stdout stays machine-readable.
"""

from __future__ import annotations

import logging
import sys

import structlog

from marketplace.infrastructure.config import Settings


def configure_logging(settings: Settings) -> None:
    level = getattr(logging, settings.log_level, logging.WARNING)

    handler = logging.StreamHandler(sys.stderr)
    root_logger = logging.getLogger()
    root_logger.handlers = [handler]
    root_logger.setLevel(level)

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.contextvars.merge_contextvars,
    ]
    if settings.log_format == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def bind_actor(user_id: str | None) -> None:
    """Attach the acting user to every log line of this invocation."""
    structlog.contextvars.clear_contextvars()
    if user_id is not None:
        structlog.contextvars.bind_contextvars(actor=user_id)
