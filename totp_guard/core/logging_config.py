"""Structured logging for totp_guard.

Library code only asks structlog for loggers; rendering and handlers belong
to the host application. ``configure_logging`` is for the bundled CLI.
"""

from __future__ import annotations

import logging
import sys
from functools import lru_cache
from typing import Any

import structlog

from totp_guard.core.config import settings

LOGGER_NAME = "totp_guard"


@lru_cache(maxsize=1)
def configure_logging() -> None:
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, settings.LOG_LEVEL, logging.INFO),
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
    )


def get_logger(**initial_context: Any) -> Any:
    """Return a lazy logger; it picks up whatever config is active when used."""

    return structlog.get_logger(LOGGER_NAME, **initial_context)


def log_event(
    logger: Any,
    service: str,
    event: str,
    level: str = "warning",
    **extra: Any,
) -> None:
    log_method = getattr(logger, level.lower(), None)
    if not callable(log_method):
        log_method = logger.info

    log_method(event, service=service, **extra)
