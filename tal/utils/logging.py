"""
Structured logging configuration for the TAL page strategy layer.
Uses structlog for JSON logs in production and readable console logs in development.
"""

import logging
import sys
import structlog

from tal import config

# Configure standard logging; stdout is left to command output
logging.basicConfig(
    level=getattr(logging, config.LOG_LEVEL, logging.INFO),
    format="%(message)s",
    stream=sys.stderr,
)

# Determine if we should use JSON format (in production) or pretty console output (in development)
USE_JSON_LOGS = config.LOG_FORMAT.lower() in ("json", "structured") or config.ENVIRONMENT == "production"

structlog.configure(
    processors=[
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
        structlog.processors.JSONRenderer() if USE_JSON_LOGS else structlog.dev.ConsoleRenderer(colors=False),
    ],
    logger_factory=structlog.stdlib.LoggerFactory(),
    wrapper_class=structlog.stdlib.BoundLogger,
    cache_logger_on_first_use=True,
)

# Get a configured logger
def get_logger(name: str = None) -> structlog.stdlib.BoundLogger:
    """Get a pre-configured structlog logger."""
    return structlog.get_logger(name)
