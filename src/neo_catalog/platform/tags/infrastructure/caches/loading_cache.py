"""Loading cache.

ONLY bounded load-on-miss caching - in-memory cache keyed by string with
LRU eviction by capacity, absolute expiry after write, and per-key
coalescing of concurrent loads.

Following maximum separation architecture - one file = one purpose.
"""

import asyncio
import logging
import time
from collections import OrderedDict
from dataclasses import dataclass, asdict
from typing import Any, Awaitable, Callable, Dict, Generic, Optional, TypeVar

from ...core.value_objects.cache_spec import CacheSpec
from .load_result import LoadFailure, LoadResult

logger = logging.getLogger(__name__)

V = TypeVar("V")

Loader = Callable[[str], Awaitable[V]]
Clock = Callable[[], float]


@dataclass
class CacheStats:
    """Loading cache counters."""
    hits: int = 0
    misses: int = 0
    loads: int = 0
    load_failures: int = 0
    evictions: int = 0
    expirations: int = 0

    @property
    def hit_rate(self) -> float:
        """Hit rate percentage."""
        total = self.hits + self.misses
        if total == 0:
            return 0.0
        return (self.hits / total) * 100.0


@dataclass
class _Entry(Generic[V]):
    value: V
    written_at: float


class LoadingCache(Generic[V]):
    """Size-bounded, time-expiring, load-on-miss cache.

    Features:
    - LRU eviction once ``max_entries`` is exceeded
    - Entries expire ``ttl_seconds`` after they were written, whatever
      their access pattern
    - Concurrent misses on one key share a single loader call
    - Failed loads are returned to every waiter and never stored

    Instances are bound to the event loop they are used from.
    """

    def __init__(
        self,
        name: str,
        loader: Loader,
        spec: CacheSpec,
        clock: Clock = time.monotonic
    ):
        """Initialize loading cache.

        Args:
            name: Cache name used in logs and stats
            loader: Coroutine function resolving a key to its value
            spec: Capacity and TTL
            clock: Monotonic time source in seconds
        """
        self._name = name
        self._loader = loader
        self._spec = spec
        self._clock = clock
        self._entries: "OrderedDict[str, _Entry[V]]" = OrderedDict()
        self._in_flight: Dict[str, "asyncio.Task[LoadResult[V]]"] = {}
        self._generation = 0
        self._stats = CacheStats()
        self._lock = asyncio.Lock()

    @property
    def name(self) -> str:
        return self._name

    @property
    def spec(self) -> CacheSpec:
        return self._spec

    async def get(self, key: str) -> LoadResult[V]:
        """Get value for key, loading it on a miss."""
        async with self._lock:
            entry = self._entries.get(key)
            if entry is not None:
                if self._is_expired(entry):
                    del self._entries[key]
                    self._stats.expirations += 1
                    logger.debug(f"Expired {self._name} entry {key}")
                else:
                    self._entries.move_to_end(key)
                    self._stats.hits += 1
                    return LoadResult.loaded(entry.value)

            self._stats.misses += 1
            load = self._in_flight.get(key)
            if load is None:
                load = asyncio.create_task(self._load_and_store(key, self._generation))
                self._in_flight[key] = load

        # Cancelling one caller must not cancel the load the others wait on
        return await asyncio.shield(load)

    async def invalidate(self, key: str) -> bool:
        """Discard the entry for key. Returns True if one was present."""
        async with self._lock:
            return self._entries.pop(key, None) is not None

    async def invalidate_all(self) -> int:
        """Discard every entry. Loads already in flight are not stored."""
        async with self._lock:
            count = len(self._entries)
            self._entries.clear()
            self._in_flight.clear()
            self._generation += 1
        logger.debug(f"Invalidated {count} {self._name} entries")
        return count

    def size(self) -> int:
        """Number of resident entries, expired ones included until touched."""
        return len(self._entries)

    def stats(self) -> Dict[str, Any]:
        """Get cache statistics."""
        return {
            "name": self._name,
            **asdict(self._stats),
            "hit_rate_percent": self._stats.hit_rate,
            "size": len(self._entries),
            "max_entries": self._spec.max_entries,
            "ttl_seconds": self._spec.ttl_seconds,
        }

    def __contains__(self, key: object) -> bool:
        entry = self._entries.get(key)  # type: ignore[arg-type]
        return entry is not None and not self._is_expired(entry)

    async def _load_and_store(self, key: str, generation: int) -> LoadResult[V]:
        result = await self._load(key)
        async with self._lock:
            # A clean-up during the load invalidates its result for storage
            if result.ok and generation == self._generation:
                self._put(key, result.value)
            if self._in_flight.get(key) is asyncio.current_task():
                del self._in_flight[key]
        return result

    async def _load(self, key: str) -> LoadResult[V]:
        self._stats.loads += 1
        try:
            value = await self._loader(key)
        except Exception as e:
            self._stats.load_failures += 1
            failure = LoadFailure.from_exception(key, e)
            logger.warning(f"Failed to load {self._name} {key} ({failure.kind.value}): {e}")
            return LoadResult.failed(failure)
        return LoadResult.loaded(value)

    def _put(self, key: str, value: V) -> None:
        self._entries[key] = _Entry(value=value, written_at=self._clock())
        self._entries.move_to_end(key)
        while len(self._entries) > self._spec.max_entries:
            evicted_key, _ = self._entries.popitem(last=False)
            self._stats.evictions += 1
            logger.debug(f"Evicted {self._name} entry {evicted_key}")

    def _is_expired(self, entry: "_Entry[V]") -> bool:
        return self._clock() - entry.written_at >= self._spec.ttl_seconds


def create_loading_cache(
    name: str,
    loader: Loader,
    max_entries: int,
    ttl_seconds: float,
    clock: Optional[Clock] = None
) -> LoadingCache:
    """Create loading cache with configuration.

    Args:
        name: Cache name
        loader: Coroutine function resolving a key to its value
        max_entries: Maximum resident entries
        ttl_seconds: Expiry after write
        clock: Optional time source

    Returns:
        Configured loading cache
    """
    return LoadingCache(
        name=name,
        loader=loader,
        spec=CacheSpec(max_entries=max_entries, ttl_seconds=ttl_seconds),
        clock=clock or time.monotonic,
    )
