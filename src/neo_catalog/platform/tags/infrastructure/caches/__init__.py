"""In-memory loading caches."""

from .load_result import LoadFailure, LoadFailureKind, LoadResult
from .loading_cache import CacheStats, LoadingCache, create_loading_cache

__all__ = [
    "CacheStats",
    "LoadFailure",
    "LoadFailureKind",
    "LoadResult",
    "LoadingCache",
    "create_loading_cache",
]
