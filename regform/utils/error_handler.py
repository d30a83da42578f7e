"""
Standardized error handling for the registration form engine.

Validation violations are never exceptions: they are plain messages kept in
the error table. The exceptions here cover the host surface (a referenced
field that does not exist) and configuration problems. Surface errors are
absorbed by ErrorHandler.wrap_operation so a partially rendered form
degrades to a logged no-op instead of crashing the engine.
"""

import traceback
from typing import Optional, Any, Dict, Callable
from enum import Enum
import logging


class ErrorLevel(Enum):
    """Error severity levels."""
    CRITICAL = "critical"  # System failure, cannot continue
    ERROR = "error"  # Operation failed, but system can continue
    WARNING = "warning"  # Operation skipped, form keeps working
    INFO = "info"  # Informational message


class ErrorCode(Enum):
    """Standardized error codes for different error types."""

    # Surface Errors (1xxx)
    FIELD_NOT_FOUND = 1001
    SLOT_NOT_FOUND = 1002

    # Validation Errors (2xxx)
    UNKNOWN_FIELD = 2001

    # Configuration Errors (3xxx)
    CONFIGURATION_ERROR = 3001


class FormError(Exception):
    """Base exception class for form engine errors."""

    def __init__(
        self,
        message: str,
        code: ErrorCode,
        level: ErrorLevel = ErrorLevel.ERROR,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None
    ):
        """
        Initialize form error.

        Args:
            message: Human-readable error message
            code: Error code from ErrorCode enum
            level: Severity level from ErrorLevel enum
            details: Additional error details as dictionary
            cause: Original exception that caused this error
        """
        super().__init__(message)
        self.message = message
        self.code = code
        self.level = level
        self.details = details or {}
        self.cause = cause

        if cause:
            self.details['original_error'] = str(cause)
            self.details['traceback'] = traceback.format_exc()

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for serialization."""
        return {
            'message': self.message,
            'code': self.code.value,
            'level': self.level.value,
            'details': self.details
        }


class FieldNotFoundError(FormError):
    """Raised by a form surface when a named field or slot does not exist."""


class ErrorResult:
    """
    Standardized result wrapper for operations that may fail.
    """

    def __init__(
        self,
        success: bool,
        value: Optional[Any] = None,
        error: Optional[FormError] = None
    ):
        self.success = success
        self.value = value
        self.error = error

    @classmethod
    def ok(cls, value: Any) -> 'ErrorResult':
        """Create a successful result."""
        return cls(success=True, value=value, error=None)

    @classmethod
    def fail(cls, error: FormError) -> 'ErrorResult':
        """Create a failed result."""
        return cls(success=False, value=None, error=error)

    def unwrap(self) -> Any:
        """
        Get the value or raise the error.

        Returns:
            The value if successful

        Raises:
            FormError if failed
        """
        if self.success:
            return self.value
        else:
            raise self.error

    def unwrap_or(self, default: Any) -> Any:
        """Get the value or return a default."""
        return self.value if self.success else default


class ErrorHandler:
    """Centralized error handler with logging."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize error handler.

        Args:
            logger: Logger instance to use (creates default if None)
        """
        self.logger = logger or logging.getLogger(__name__)

    def handle(self, error: FormError) -> None:
        """
        Handle an error by logging it appropriately.

        Args:
            error: The error to handle
        """
        log_message = f"[{error.code.name}] {error.message}"

        if error.details:
            log_message += f" | Details: {error.details}"

        if error.level == ErrorLevel.CRITICAL:
            self.logger.critical(log_message)
        elif error.level == ErrorLevel.ERROR:
            self.logger.error(log_message)
        elif error.level == ErrorLevel.WARNING:
            self.logger.warning(log_message)
        else:
            self.logger.info(log_message)

    def wrap_operation(self, operation: Callable, *args, **kwargs) -> ErrorResult:
        """
        Wrap a surface operation in error handling.

        Only FormError is absorbed; anything else is a programming error and
        propagates.

        Args:
            operation: The operation to execute
            *args: Arguments for the operation
            **kwargs: Keyword arguments for the operation

        Returns:
            ErrorResult with the operation result or error
        """
        try:
            result = operation(*args, **kwargs)
            return ErrorResult.ok(result)
        except FormError as e:
            self.handle(e)
            return ErrorResult.fail(e)


# Convenience functions for common error scenarios

def field_not_found_error(field_name: str, slot: str = "field") -> FieldNotFoundError:
    """Create a missing field (or missing slot) error."""
    code = ErrorCode.FIELD_NOT_FOUND if slot == "field" else ErrorCode.SLOT_NOT_FOUND
    return FieldNotFoundError(
        message=f"Form surface has no {slot} '{field_name}'",
        code=code,
        level=ErrorLevel.WARNING,
        details={'field': field_name, 'slot': slot}
    )


def unknown_field_error(field_name: str) -> FormError:
    """Create an error for a field name outside the form definition."""
    return FormError(
        message=f"Field '{field_name}' is not part of the form definition",
        code=ErrorCode.UNKNOWN_FIELD,
        level=ErrorLevel.WARNING,
        details={'field': field_name}
    )


def configuration_error(message: str, cause: Optional[Exception] = None) -> FormError:
    """Create a configuration error (bad or missing field definitions)."""
    return FormError(
        message=message,
        code=ErrorCode.CONFIGURATION_ERROR,
        level=ErrorLevel.CRITICAL,
        cause=cause
    )
