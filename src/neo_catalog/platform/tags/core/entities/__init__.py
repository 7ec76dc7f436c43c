"""Tag platform entities."""

from .entity_type import EntityType, LABEL_ENTITY_TYPES
from .tag_label import TagLabel, TagSource

__all__ = [
    "EntityType",
    "LABEL_ENTITY_TYPES",
    "TagLabel",
    "TagSource",
]
