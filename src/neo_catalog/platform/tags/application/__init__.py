"""Tag application layer."""

from .services import *

__all__ = [
    "TagLabelCache",
    "get_tag_label_cache",
    "reset_tag_label_cache",
]
