"""
Utility functions and decorators.
"""

from .logging_utils import StructuredLogger, configure_logging, log_operation

__all__ = ["StructuredLogger", "configure_logging", "log_operation"]
