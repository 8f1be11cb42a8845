"""
Structured logging configuration.

Every module logs through ``structlog.get_logger(__name__)``; this module
wires structlog onto the standard library logging machinery once, at
application start.
"""

import logging
import sys

import structlog

from restaurant_dip.infrastructure.logging.sanitization import StructlogSanitizer


def configure_logging(
    level: str = "INFO",
    json_logs: bool = False,
    cache_logger_on_first_use: bool = True
) -> None:
    """
    Set up structured logging for the application.

    Args:
        level: Standard library level name, e.g. ``"INFO"``
        json_logs: Render events as JSON lines instead of the console format
        cache_logger_on_first_use: Freeze logger configuration after first use
    """
    log_level = getattr(logging, level.upper())

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=log_level,
        force=True
    )

    renderer = structlog.processors.JSONRenderer() if json_logs else structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            StructlogSanitizer(),
            renderer,
        ],
        context_class=dict,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=cache_logger_on_first_use,
    )

    structlog.get_logger(__name__).debug("Logging configured", log_level=level.upper(), json_logs=json_logs)
