"""Structured logging using structlog.

Importing this module configures nothing: ``logger`` writes through the
stdlib ``copy_dir`` logger using whatever structlog processors are active.
Applications that want the package's console format call
``setup_logging()`` themselves.
"""

from __future__ import annotations

import logging
import sys

import structlog

from .config import LOG_LEVEL

_stdlib_logger = logging.getLogger("copy_dir")
_stdlib_logger.addHandler(logging.NullHandler())

logger: structlog.stdlib.BoundLogger = structlog.wrap_logger(_stdlib_logger, wrapper_class=structlog.stdlib.BoundLogger)


def setup_logging(level: str = LOG_LEVEL) -> structlog.stdlib.BoundLogger:
    """Configure structlog and the root logger for console output."""
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # Set root logger level
    logging.basicConfig(level=getattr(logging, level, logging.INFO), stream=sys.stderr, format="%(message)s")

    return logger
