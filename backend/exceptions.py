"""
Custom exception classes for the application.

This module defines domain-specific exceptions that provide better error handling
and clearer error messages throughout the application.
"""

from constants import ReservationFailure


class ApplicationError(Exception):
    """Base exception for all application errors"""

    def __init__(self, message: str, details: dict | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ConfigurationError(ApplicationError):
    """Raised when there's a configuration issue"""

    def __init__(self, message: str, missing_keys: list[str] | None = None):
        details = {"missing_keys": missing_keys} if missing_keys else {}
        super().__init__(message, details)


class ValidationError(ApplicationError):
    """Raised when validation fails"""

    def __init__(self, message: str, invalid_fields: dict | None = None):
        details = {"invalid_fields": invalid_fields} if invalid_fields else {}
        super().__init__(message, details)


class DatabaseError(ApplicationError):
    """Raised when database operations fail"""

    def __init__(self, operation: str, message: str):
        details = {"operation": operation}
        super().__init__(message, details)


class ReservationError(ApplicationError):
    """Raised when a quote cannot be created or confirmed"""

    def __init__(self, reason: ReservationFailure, message: str, company: str | None = None):
        self.reason = reason
        details = {"reason": reason.value}
        if company:
            details["company"] = company
        super().__init__(message, details)


class NotFoundError(ApplicationError):
    """Raised when a lookup by identity finds nothing (caller or data-integrity bug)"""

    def __init__(self, entity: str, key, scope: str | None = None):
        details = {"entity": entity, "key": key}
        prefix = f"<{scope}> " if scope else ""
        if scope:
            details["scope"] = scope
        super().__init__(f"{prefix}No {entity} with key {key}", details)
