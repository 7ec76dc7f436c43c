"""Infrastructure-specific exceptions for neo-catalog.

This module defines exceptions related to input validation,
cache infrastructure, and technical concerns.
"""

from typing import Any, Optional

from .base import NeoCatalogError


# Cache Errors
class CacheError(NeoCatalogError):
    """Base class for cache-related errors."""
    pass


class CacheNotInitializedError(CacheError):
    """Raised when a lookup is attempted before the cache is initialized."""
    pass


# Validation Errors
class ValidationError(NeoCatalogError):
    """Raised when input validation fails."""
    pass


class InvalidArgumentError(ValidationError):
    """Raised when an argument carries an unrecognized value."""

    def __init__(self, message: str, argument: Optional[str] = None, value: Any = None):
        super().__init__(
            message,
            error_code="INVALID_ARGUMENT",
            details={"argument": argument, "value": None if value is None else str(value)},
        )


class InvalidFormatError(ValidationError):
    """Raised when field format is invalid."""
    pass


class DateParseError(InvalidFormatError):
    """Raised when a date-time string does not match the expected format."""

    def __init__(self, value: str, date_format: str):
        self.value = value
        self.date_format = date_format
        super().__init__(
            f"Unparseable date: {value!r} (expected format {date_format!r})",
            error_code="DATE_PARSE_ERROR",
            details={"value": value, "format": date_format},
        )
