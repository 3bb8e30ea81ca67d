"""
Logging configuration for fn_selector.
Provides structured logging for signature normalization and selector hashing.
"""

import logging
import sys
from typing import Any, Dict

import structlog
from structlog.stdlib import LoggerFactory

from fn_selector.core.config import settings


def setup_logging() -> None:
    """
    Configure structured logging for applications embedding the library.
    Picks a JSON or console renderer from the settings.
    """

    # Configure structlog
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
            _get_processor(),
        ],
        context_class=dict,
        logger_factory=LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    # Configure standard library logging
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, settings.LOG_LEVEL.upper()),
    )


def _get_processor():
    """
    Get the renderer matching the configured log format.

    Returns:
        Processor function for structlog
    """
    if settings.LOG_FORMAT == "json":
        return structlog.processors.JSONRenderer()
    else:
        return structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Get a structured logger instance.

    Args:
        name: Logger name (usually __name__)

    Returns:
        structlog.stdlib.BoundLogger: Configured logger instance
    """
    return structlog.get_logger(name)


def log_selector_operation(
    operation: str,
    signature: str = None,
    selector: str = None,
    status: str = "success",
    **kwargs
) -> None:
    """
    Log a selector operation.

    Successful operations are logged at info level, anything else as a warning.

    Args:
        operation: Operation type (normalize, hash)
        signature: Signature involved, raw or normalized
        selector: Resulting selector hex, when one was computed
        status: Operation status (success, sentinel, rejected)
        **kwargs: Additional context
    """
    logger = get_logger("selector.operation")
    emit = logger.info if status == "success" else logger.warning
    emit(
        "Selector operation",
        app=settings.APP_NAME,
        operation=operation,
        signature=signature,
        selector=selector,
        status=status,
        **kwargs
    )


def log_error(error: Exception, context: Dict[str, Any] = None) -> None:
    """
    Log an error with context.

    Args:
        error: Exception instance
        context: Additional context information
    """
    logger = get_logger("error")
    logger.error(
        "An error occurred",
        error=str(error),
        error_type=type(error).__name__,
        context=context or {},
    )
