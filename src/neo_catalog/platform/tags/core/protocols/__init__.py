"""Tag platform protocols."""

from .entity_repository import EntityRepository, LabelEntity

__all__ = [
    "EntityRepository",
    "LabelEntity",
]
