"""Tag application services."""

from .tag_label_cache import TagLabelCache, get_tag_label_cache, reset_tag_label_cache

__all__ = [
    "TagLabelCache",
    "get_tag_label_cache",
    "reset_tag_label_cache",
]
