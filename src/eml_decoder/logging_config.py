"""
Structured logging for the decoder, the API and the CLI.

Everything goes through structlog and is written to stderr, so the CLI can
print its JSON summary on stdout untouched. Level and renderer come from
settings and can be overridden per process (``eml-decode -v``).
"""

import logging
import sys
from typing import Optional

import structlog

from .config import settings


def _renderer(json_output: bool):
    if json_output:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def setup_logging(level: Optional[str] = None, json_output: Optional[bool] = None) -> None:
    """
    Configure structlog.

    Args:
        level: Level name overriding ``settings.log_level``
        json_output: Renderer choice overriding ``settings.log_json``

    Raises:
        ValueError: If the level name is unknown
    """
    level_name = (level or settings.log_level).upper()
    numeric_level = logging.getLevelName(level_name)
    if not isinstance(numeric_level, int):
        raise ValueError(f"unknown log level: {level_name}")

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso"),
            _renderer(settings.log_json if json_output is None else json_output),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )
