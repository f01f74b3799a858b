"""
Logging configuration module for structured logging.

This module configures the logging system using structlog. It provides
structured logging with JSON formatting for production and human-readable
console output for development.

The logging configuration includes:
- Level filtering through the standard library
- Timestamp formatting
- Log level inclusion
- JSON/Console output based on settings
- Logger caching
"""

import logging
from typing import Optional

import structlog
from structlog.types import Processor

from src.core.config.settings import settings


def build_processors(json_logs: bool) -> list[Processor]:
    """Returns the processor chain used by `configure_logging`."""
    return [
        structlog.stdlib.filter_by_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.stdlib.add_log_level,
        structlog.processors.JSONRenderer() if json_logs else structlog.dev.ConsoleRenderer(),
    ]


def configure_logging(log_level: Optional[str] = None, json_logs: Optional[bool] = None) -> None:
    """
    Configures the logging system.

    Arguments left as ``None`` fall back to ``settings.LOG_LEVEL`` and
    ``settings.LOG_JSON``. The standard library root logger is set to the
    requested level so that `filter_by_level` drops debug events (such as
    the per-construction messages of the value objects) unless asked for.
    """
    level = (log_level or settings.LOG_LEVEL).upper()
    use_json = settings.LOG_JSON if json_logs is None else json_logs

    logging.basicConfig(format="%(message)s", level=level)
    logging.getLogger().setLevel(level)

    structlog.configure(
        processors=build_processors(use_json),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


logger = structlog.get_logger()
