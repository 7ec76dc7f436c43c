"""Exceptions module for neo-catalog.

This module provides the complete exception hierarchy for neo-catalog,
organized by domain concerns and infrastructure concerns.
"""

from .base import (
    NeoCatalogError,
    get_http_status_code,
    create_error_response,
)

from .domain import (
    ConfigurationError,
    BusinessLogicError,
    ResourceNotFoundError,
    EntityNotFoundError,
    entity_not_found_message,
)

from .infrastructure import (
    CacheError,
    CacheNotInitializedError,
    ValidationError,
    InvalidArgumentError,
    InvalidFormatError,
    DateParseError,
)

from .http_mapping import HTTP_STATUS_MAP, HttpStatusMapper

__all__ = [
    # Base
    "NeoCatalogError",
    "get_http_status_code",
    "create_error_response",

    # Domain
    "ConfigurationError",
    "BusinessLogicError",
    "ResourceNotFoundError",
    "EntityNotFoundError",
    "entity_not_found_message",

    # Infrastructure
    "CacheError",
    "CacheNotInitializedError",
    "ValidationError",
    "InvalidArgumentError",
    "InvalidFormatError",
    "DateParseError",

    # HTTP mapping
    "HTTP_STATUS_MAP",
    "HttpStatusMapper",
]
