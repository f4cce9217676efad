"""
Structured Logging Utilities

Provides logging setup for scripts and utilities for adding structured
context (renter, company, operation) to log messages.
"""

import logging
import sys
from contextvars import ContextVar
from functools import wraps
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Dict, Optional

from config.rental_config import get_log_dir, get_log_level


# Context variable for session-scoped logging context
_logging_context: ContextVar[Dict[str, Any]] = ContextVar('logging_context', default={})

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# Keyword arguments copied into the log context by log_operation
CONTEXT_KEYS = ("company_name", "renter", "car_type", "region", "year")


def configure_logging(log_file_name: str = "car_rental.log") -> Path:
    """
    Install a rotating file handler and a console handler on the root logger.

    Args:
        log_file_name: File name inside the configured log directory

    Returns:
        Path of the log file
    """
    log_file = get_log_dir() / log_file_name
    level = get_log_level()
    log_formatter = logging.Formatter(LOG_FORMAT)

    # File handler with rotation (10MB per file, keep 5 backups)
    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=10 * 1024 * 1024,
        backupCount=5,
        encoding='utf-8'
    )
    file_handler.setFormatter(log_formatter)
    file_handler.setLevel(level)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(log_formatter)
    console_handler.setLevel(level)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)

    logging.getLogger(__name__).info(f"Logging initialized: {log_file}")
    return log_file


class StructuredLogger:
    """
    Wrapper around standard logger that adds structured context.

    Usage:
        logger = StructuredLogger(__name__)
        logger.info("Quote created", extra={
            "renter": "alice",
            "company_name": "Hertz"
        })
    """

    def __init__(self, name: str):
        self.logger = logging.getLogger(name)

    def _add_context(self, extra: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Merge the current context with the per-call extra dict."""
        context = _logging_context.get().copy()
        if extra:
            context.update(extra)
        return context

    def debug(self, message: str, extra: Optional[Dict[str, Any]] = None):
        self.logger.debug(message, extra=self._add_context(extra))

    def info(self, message: str, extra: Optional[Dict[str, Any]] = None):
        self.logger.info(message, extra=self._add_context(extra))

    def warning(self, message: str, extra: Optional[Dict[str, Any]] = None):
        self.logger.warning(message, extra=self._add_context(extra))

    def error(self, message: str, extra: Optional[Dict[str, Any]] = None, exc_info: bool = False):
        self.logger.error(message, extra=self._add_context(extra), exc_info=exc_info)


def get_logging_context() -> Dict[str, Any]:
    return _logging_context.get().copy()


def set_logging_context(**kwargs):
    """
    Set logging context for the current session/operation.

    The context is included in all StructuredLogger messages within the
    current context.

    Example:
        set_logging_context(renter="alice")
    """
    context = _logging_context.get().copy()
    context.update(kwargs)
    _logging_context.set(context)


def clear_logging_context():
    _logging_context.set({})


def log_operation(operation_name: str):
    """
    Decorator logging start, completion and failure of an operation.

    Known identifiers passed as keyword arguments (company_name, renter, ...)
    are added to the log context. Exceptions are logged and re-raised.

    Example:
        @log_operation("create_quote")
        def create_quote(self, company_name, constraints):
            ...
    """
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            logger = StructuredLogger(func.__module__)

            context = {"operation": operation_name}
            for key in CONTEXT_KEYS:
                if key in kwargs:
                    context[key] = kwargs[key]

            logger.debug(f"Starting {operation_name}", extra=context)

            try:
                result = func(*args, **kwargs)
                logger.info(f"Completed {operation_name}", extra=context)
                return result
            except Exception as e:
                context["error"] = str(e)
                context["error_type"] = type(e).__name__
                logger.error(f"Failed {operation_name}: {e}", extra=context)
                raise

        return wrapper

    return decorator
