"""HTTP status code mapping for exceptions.

Static exception-to-status-code mapping with optional per-mapper
overrides, resolved through the exception's class hierarchy.
"""

from typing import Dict, Optional, Type

from .base import NeoCatalogError
from .domain import (
    BusinessLogicError,
    ConfigurationError,
    EntityNotFoundError,
    ResourceNotFoundError,
)
from .infrastructure import (
    CacheError,
    CacheNotInitializedError,
    DateParseError,
    InvalidArgumentError,
    InvalidFormatError,
    ValidationError,
)


# Static HTTP Status Code mapping for exceptions
HTTP_STATUS_MAP: Dict[Type[Exception], int] = {
    # 400 Bad Request
    ValidationError: 400,
    InvalidArgumentError: 400,
    InvalidFormatError: 400,
    DateParseError: 400,
    BusinessLogicError: 400,

    # 404 Not Found
    ResourceNotFoundError: 404,
    EntityNotFoundError: 404,

    # 500 Internal Server Error
    ConfigurationError: 500,
    CacheError: 500,

    # 503 Service Unavailable
    CacheNotInitializedError: 503,

    # Default for NeoCatalogError
    NeoCatalogError: 500,
}


class HttpStatusMapper:
    """HTTP status code mapper for exceptions.

    Overrides take precedence over the static mapping and are matched
    by class name, walking up the exception's MRO.
    """

    def __init__(self, overrides: Optional[Dict[str, int]] = None):
        self._overrides = dict(overrides or {})
        self._cache: Dict[Type[Exception], int] = {}

    def get_status_code(self, exception: Exception) -> int:
        """Get HTTP status code for exception (cached per type)."""
        exception_type = type(exception)

        if exception_type in self._cache:
            return self._cache[exception_type]

        hierarchy = [klass for klass in exception_type.__mro__ if klass not in (Exception, BaseException, object)]

        # Any override in the hierarchy beats every static entry
        status_code = next(
            (self._overrides[klass.__name__] for klass in hierarchy if klass.__name__ in self._overrides),
            None,
        )
        if status_code is None:
            status_code = next(
                (HTTP_STATUS_MAP[klass] for klass in hierarchy if klass in HTTP_STATUS_MAP),
                500,
            )

        self._cache[exception_type] = status_code
        return status_code

    def clear_cache(self) -> None:
        """Clear the status code cache."""
        self._cache.clear()


_default_mapper = HttpStatusMapper()


def get_http_status_code(exception: Exception) -> int:
    """Get HTTP status code for exception using the default mapper."""
    return _default_mapper.get_status_code(exception)
