"""Tag infrastructure layer.

Concrete cache storage used by the tag application services.
"""

from .caches import *

__all__ = [
    "CacheStats",
    "LoadFailure",
    "LoadFailureKind",
    "LoadResult",
    "LoadingCache",
    "create_loading_cache",
]
