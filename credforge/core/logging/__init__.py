"""
Logging configuration module for structured logging.

This module configures the application's logging system using structlog.
It provides JSON output for deployed environments and human-readable console
output for development.

Credential material never reaches a log line: callers pass usernames and
emails through `credforge.utils.masking` and log only the type and length of
generated keys.
"""

import logging

import structlog

from credforge.core.config.settings import settings


def configure_logging(log_level: str | None = None, json_logs: bool | None = None) -> None:
    """
    Configures the application's logging system.

    This function sets up structlog with:
    1. ISO format timestamps
    2. Log level inclusion
    3. JSON formatting when `json_logs` (default: settings.LOG_JSON) is set
    4. Console formatting otherwise
    5. Standard library logger factory and bound loggers
    6. Logger caching for performance
    """
    level = (log_level or settings.LOG_LEVEL).upper()
    use_json = settings.LOG_JSON if json_logs is None else json_logs

    logging.basicConfig(format="%(message)s", level=level, force=True)

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.stdlib.add_log_level,
        structlog.processors.JSONRenderer() if use_json else structlog.dev.ConsoleRenderer(),
    ]

    structlog.configure(
        processors=processors,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


# Create a singleton logger instance for the application
logger = structlog.get_logger()
