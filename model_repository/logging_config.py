"""
Logging configuration for repositories.

Configures structlog on top of the stdlib logging module and provides the
adapter repositories use for context-scoped logging.
"""

import logging
import sys
from typing import Any, Mapping, Optional

import structlog

from .config import Settings, get_settings
from .repositories.interfaces import ILogger


def setup_logging(log_level: str = "INFO", json_logs: bool = True) -> None:
    """
    Configure structlog and the stdlib root logger.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_logs: Render JSON lines instead of human-readable console output
    """
    logging.basicConfig(
        level=getattr(logging, log_level.upper(), logging.INFO),
        format="%(message)s",
        stream=sys.stdout,
        force=True,
    )

    renderer: Any
    if json_logs:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        context_class=dict,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: Optional[str] = None) -> Any:
    """
    Get a structlog logger.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Bound structlog logger
    """
    return structlog.get_logger(name)


class StructlogLogger(ILogger):
    """
    Adapter exposing a structlog logger through ``child(context)``.

    The child is a structlog bound logger, so ``info`` and ``error``
    render the bound context alongside the message.
    """

    def __init__(self, logger: Optional[Any] = None, name: Optional[str] = None):
        self._logger = logger if logger is not None else get_logger(name)

    def child(self, context: Mapping[str, Any]) -> Any:
        return self._logger.bind(**context)


def configure_from_settings(settings: Optional[Settings] = None) -> StructlogLogger:
    """
    Configure logging from settings and return the service logger.

    Args:
        settings: Settings to use, defaults to the cached settings

    Returns:
        Adapter bound to ``settings.SERVICE_NAME``, ready to inject
    """
    settings = settings or get_settings()
    setup_logging(settings.LOG_LEVEL, json_logs=settings.LOG_JSON)
    return StructlogLogger(name=settings.SERVICE_NAME)
