"""Tag platform value objects."""

from .cache_spec import CacheSpec
from .fields import Fields
from .fully_qualified_name import FullyQualifiedName

__all__ = [
    "CacheSpec",
    "Fields",
    "FullyQualifiedName",
]
