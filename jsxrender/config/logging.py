"""
Logging Configuration
====================

Structured logging configuration with environment-specific settings.
Uses structlog for structured logging with JSON output in production.
"""

import logging
import logging.config
import sys
from typing import Dict, Any, Optional, TYPE_CHECKING
import structlog
from structlog.types import Processor

from .settings import get_settings

if TYPE_CHECKING:
    from .settings import Settings


def setup_logging(settings: Optional["Settings"] = None, force: bool = False) -> None:
    """
    Setup library logging configuration.

    Nothing is configured on import; applications and test suites call this
    explicitly. An existing structlog configuration is kept unless ``force``
    is set. The ``jsxrender`` stdlib logger is configured either way.

    Args:
        settings: Settings to configure from, defaults to ``get_settings()``
        force: Replace an existing structlog configuration
    """
    settings = settings if settings is not None else get_settings()

    if force or not structlog.is_configured():
        # Configure structlog
        processors: list[Processor] = [
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
        ]

        if settings.environment == "production":
            # JSON output for production
            processors.append(structlog.processors.JSONRenderer())
        else:
            # Pretty output for development
            processors.append(structlog.dev.ConsoleRenderer(colors=False))

        structlog.configure(
            processors=processors,
            wrapper_class=structlog.stdlib.BoundLogger,
            logger_factory=structlog.stdlib.LoggerFactory(),
            cache_logger_on_first_use=True,
        )

    # Configure standard library logging
    logging_config = get_logging_config(settings)
    logging.config.dictConfig(logging_config)


def get_logging_config(settings: "Settings") -> Dict[str, Any]:
    """Get logging configuration dictionary."""
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {
                "format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
            "json": {
                "()": "pythonjsonlogger.json.JsonFormatter",
                "format": "%(asctime)s %(name)s %(levelname)s %(message)s",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "level": settings.log_level,
                "formatter": "standard" if settings.environment != "production" else "json",
                "stream": sys.stderr,
            },
        },
        "loggers": {
            "jsxrender": {
                "level": settings.log_level,
                "handlers": ["console"],
                "propagate": settings.environment == "testing",
            },
        },
    }


def get_logger(name: str) -> structlog.BoundLogger:
    """
    Get a structured logger instance.

    The logger always writes through the stdlib logger of the same name, so
    stdlib levels and handlers decide what is emitted even when structlog has
    not been configured.
    """
    return structlog.wrap_logger(logging.getLogger(name), wrapper_class=structlog.stdlib.BoundLogger)
