"""Tag core domain layer.

Clean core containing only entities, value objects and protocols.
No business logic or external dependencies.
"""

from .entities import *
from .value_objects import *
from .protocols import *

__all__ = [
    # Entities
    "EntityType",
    "LABEL_ENTITY_TYPES",
    "TagLabel",
    "TagSource",

    # Value Objects
    "CacheSpec",
    "Fields",
    "FullyQualifiedName",

    # Protocols
    "EntityRepository",
    "LabelEntity",
]
