"""Domain-specific exceptions for neo-catalog.

This module defines domain-specific exceptions that relate to
catalog entities and business logic.
"""

from typing import Any, Optional

from .base import NeoCatalogError


# Configuration Errors
class ConfigurationError(NeoCatalogError):
    """Raised when there's a configuration issue."""
    pass


# Business Logic Errors
class BusinessLogicError(NeoCatalogError):
    """Raised when business logic validation fails."""
    pass


class ResourceNotFoundError(BusinessLogicError):
    """Raised when required resource is not found."""
    pass


class EntityNotFoundError(ResourceNotFoundError):
    """Raised when a catalog entity cannot be resolved by name.

    Repository failures and genuinely missing entities both surface as
    this error; ``details["reason"]`` keeps the two apart.
    """

    def __init__(
        self,
        entity_type: str,
        name: str,
        reason: Optional[str] = None,
        **details: Any
    ):
        self.entity_type = entity_type
        self.name = name
        super().__init__(
            entity_not_found_message(entity_type, name),
            error_code="ENTITY_NOT_FOUND",
            details={
                "entity_type": entity_type,
                "name": name,
                "reason": reason,
                **details,
            },
        )


def entity_not_found_message(entity_type: str, name: str) -> str:
    """Message used for every missing-entity error."""
    return f"{entity_type} instance for {name} not found"
