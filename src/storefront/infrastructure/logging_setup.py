"""structlog configuration for the CLI process.

Log output goes to stderr so it never mixes with command output.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

from storefront.infrastructure.config import LogFormat, StorefrontSettings


def configure_logging(settings: StorefrontSettings) -> None:
    """Configure structlog from *settings*. Later calls reconfigure."""
    level = logging.getLevelName(settings.log_level.upper())
    if not isinstance(level, int):
        level = logging.WARNING

    renderer: Any
    if settings.log_format == LogFormat.JSON:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )
