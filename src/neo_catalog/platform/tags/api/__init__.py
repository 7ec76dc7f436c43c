"""Tag API integration."""

from .dependencies import LabelCacheDependency, get_label_cache

__all__ = [
    "LabelCacheDependency",
    "get_label_cache",
]
