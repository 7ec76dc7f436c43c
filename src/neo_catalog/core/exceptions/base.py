"""Base exceptions for neo-catalog.

Every error raised by the library derives from ``NeoCatalogError`` and
carries a machine-readable code plus structured details, so the REST
layer can render it without knowing the concrete type.
"""

from typing import Any, Dict, Optional


class NeoCatalogError(Exception):
    """Base exception for all neo-catalog errors.

    Args:
        message: Human readable message, also the ``str()`` of the error
        error_code: Stable code for clients; defaults to the class name
        details: Extra context such as the offending name or argument
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or type(self).__name__
        self.details = dict(details or {})

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.error_code,
            "message": self.message,
            "details": self.details,
            "type": type(self).__name__,
        }

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r}, error_code={self.error_code!r})"


def get_http_status_code(exception: Exception) -> int:
    """HTTP status for an exception, via the default status mapper."""
    from .http_mapping import get_http_status_code as get_mapped_status_code
    return get_mapped_status_code(exception)


def create_error_response(exception: NeoCatalogError) -> Dict[str, Any]:
    """API error envelope: ``{"error": {code, message, details, type}}``."""
    return {"error": exception.to_dict()}
