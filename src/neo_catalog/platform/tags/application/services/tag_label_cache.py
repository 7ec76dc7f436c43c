"""Tag label cache service.

ONLY label lookups - caches tags, classifications, glossaries and glossary
terms by fully qualified name for quick resolution of tag labels.

Following maximum separation architecture - one file = one purpose.
"""

import asyncio
import logging
import time
from typing import Any, Dict, Mapping, Optional, Tuple

from .....config.settings import CatalogSettings, get_settings
from .....core.exceptions import (
    CacheNotInitializedError,
    ConfigurationError,
    EntityNotFoundError,
    InvalidArgumentError,
)
from ...core.entities.entity_type import EntityType, LABEL_ENTITY_TYPES
from ...core.entities.tag_label import TagLabel, TagSource
from ...core.protocols.entity_repository import EntityRepository, LabelEntity
from ...core.value_objects.cache_spec import CacheSpec
from ...core.value_objects.fields import Fields
from ...core.value_objects.fully_qualified_name import FullyQualifiedName
from ...infrastructure.caches.loading_cache import Clock, Loader, LoadingCache

logger = logging.getLogger(__name__)


class TagLabelCache:
    """Lookup cache for the entities used to label assets.

    Both glossary terms and classification tags are used for labeling.
    Each of the four entity types gets its own bounded, time-expiring
    loading cache backed by the matching repository.

    Lifecycle:
    - ``initialize()`` builds the caches (repeated calls only log)
    - ``clean_up()`` / ``close()`` drops every entry and the caches themselves
    """

    def __init__(
        self,
        repositories: Mapping[EntityType, EntityRepository],
        settings: Optional[CatalogSettings] = None,
        clock: Clock = time.monotonic
    ):
        """Initialize tag label cache.

        Args:
            repositories: Repository per entity type
            settings: Cache sizing and TTL, environment settings by default
            clock: Time source shared by the caches
        """
        self._repositories = dict(repositories)
        self._settings = settings or get_settings()
        self._clock = clock
        self._caches: Dict[EntityType, LoadingCache] = {}
        self._initialized = False
        self._lifecycle_lock = asyncio.Lock()

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    async def initialize(self) -> None:
        """Build the four caches. Safe to call more than once."""
        async with self._lifecycle_lock:
            if self._initialized:
                logger.info("Tag label cache is already initialized")
                return

            missing = [t.value for t in LABEL_ENTITY_TYPES if t not in self._repositories]
            if missing:
                raise ConfigurationError(
                    f"No repository registered for {', '.join(missing)}",
                    details={"missing": missing},
                )

            caches: Dict[EntityType, LoadingCache] = {}
            for entity_type in LABEL_ENTITY_TYPES:
                spec = CacheSpec(
                    max_entries=self._settings.max_entries_for(entity_type),
                    ttl_seconds=self._settings.label_cache_ttl_seconds,
                )
                caches[entity_type] = LoadingCache(
                    name=entity_type.value,
                    loader=self._create_loader(entity_type, self._repositories[entity_type]),
                    spec=spec,
                    clock=self._clock,
                )
                logger.debug(f"Built {entity_type.value} cache ({spec})")

            self._caches = caches
            self._initialized = True
            logger.info("Tag label cache initialized")

    async def clean_up(self) -> None:
        """Evict all entries and mark the cache uninitialized."""
        async with self._lifecycle_lock:
            for cache in self._caches.values():
                await cache.invalidate_all()
            self._caches = {}
            self._initialized = False
            logger.info("Tag label cache cleaned up")

    async def close(self) -> None:
        """Release the cache. Alias of ``clean_up``."""
        await self.clean_up()

    # Typed getters
    async def get_classification(self, classification_name: str) -> LabelEntity:
        return await self._get(EntityType.CLASSIFICATION, classification_name)

    async def get_tag(self, tag_fqn: str) -> LabelEntity:
        return await self._get(EntityType.TAG, tag_fqn)

    async def get_glossary(self, glossary_name: str) -> LabelEntity:
        return await self._get(EntityType.GLOSSARY, glossary_name)

    async def get_glossary_term(self, glossary_term_fqn: str) -> LabelEntity:
        return await self._get(EntityType.GLOSSARY_TERM, glossary_term_fqn)

    async def get_description(self, label: TagLabel) -> Optional[str]:
        """Description of the tag or glossary term a label points to."""
        if label.source == TagSource.CLASSIFICATION:
            entity = await self.get_tag(label.tag_fqn)
        elif label.source == TagSource.GLOSSARY:
            entity = await self.get_glossary_term(label.tag_fqn)
        else:
            raise self._invalid_source(label)
        return entity.description

    async def is_mutually_exclusive(self, label: TagLabel) -> bool:
        """Returns True if the parent of the tag label is mutually exclusive.

        A two-part name has a root parent (classification or glossary);
        deeper names have a tag or glossary term as parent.
        """
        if label.source not in (TagSource.CLASSIFICATION, TagSource.GLOSSARY):
            raise self._invalid_source(label)

        fqn_parts = FullyQualifiedName.split(label.tag_fqn)
        parent_fqn = FullyQualifiedName.get_parent_fqn(fqn_parts)
        if parent_fqn is None:
            raise InvalidArgumentError(
                f"Tag label {label.tag_fqn} has no parent",
                argument="tag_fqn",
                value=label.tag_fqn,
            )
        root_parent = len(fqn_parts) == 2

        if label.source == TagSource.CLASSIFICATION:
            parent = (
                await self.get_classification(parent_fqn)
                if root_parent
                else await self.get_tag(parent_fqn)
            )
        else:
            parent = (
                await self.get_glossary(parent_fqn)
                if root_parent
                else await self.get_glossary_term(parent_fqn)
            )
        return bool(parent.mutually_exclusive)

    async def invalidate(self, entity_type: EntityType, name: str) -> bool:
        """Drop one cached entity, e.g. after it was updated."""
        return await self._require_cache(entity_type).invalidate(name)

    def stats(self) -> Dict[str, Dict[str, Any]]:
        """Statistics per entity type."""
        return {entity_type.value: cache.stats() for entity_type, cache in self._caches.items()}

    async def _get(self, entity_type: EntityType, name: str) -> LabelEntity:
        result = await self._require_cache(entity_type).get(name)
        if result.failure is not None:
            raise EntityNotFoundError(entity_type.value, name, reason=result.failure.kind.value)
        return result.value

    def _require_cache(self, entity_type: EntityType) -> LoadingCache:
        if not self._initialized:
            raise CacheNotInitializedError(
                "Tag label cache is not initialized",
                details={"entity_type": entity_type.value},
            )
        return self._caches[entity_type]

    @staticmethod
    def _create_loader(entity_type: EntityType, repository: EntityRepository) -> Loader:
        async def load(name: str) -> LabelEntity:
            entity = await repository.get_by_name(None, name, Fields.EMPTY)
            if entity is None:
                raise EntityNotFoundError(entity_type.value, name, reason="not_found")
            logger.info(f"Loaded {entity_type.value} {entity.name}:{entity.id}")
            return entity
        return load

    @staticmethod
    def _invalid_source(label: TagLabel) -> InvalidArgumentError:
        source = getattr(label.source, "value", label.source)
        return InvalidArgumentError(f"Invalid source type {source}", argument="source", value=source)


# Shared process-wide instance
_shared_cache: Optional[TagLabelCache] = None
_shared_guard: Optional[Tuple[asyncio.AbstractEventLoop, asyncio.Lock]] = None


def _shared_lock() -> asyncio.Lock:
    """Guard for the shared instance, recreated when the running loop changes.

    The cache itself is used from one loop at a time; successive loops
    (test runs, a restarted application) each get a fresh lock.
    """
    global _shared_guard
    loop = asyncio.get_running_loop()
    if _shared_guard is None or _shared_guard[0] is not loop:
        _shared_guard = (loop, asyncio.Lock())
    return _shared_guard[1]


async def get_tag_label_cache(
    repositories: Optional[Mapping[EntityType, EntityRepository]] = None,
    settings: Optional[CatalogSettings] = None
) -> TagLabelCache:
    """Get the shared tag label cache, creating and initializing it once.

    Repositories are required on the first call only.
    """
    global _shared_cache
    async with _shared_lock():
        if _shared_cache is None:
            if repositories is None:
                raise CacheNotInitializedError(
                    "Shared tag label cache has not been created; pass repositories on first use"
                )
            cache = TagLabelCache(repositories, settings=settings)
            await cache.initialize()
            _shared_cache = cache
        elif repositories is not None:
            logger.info("Tag label cache is already initialized")
        return _shared_cache


async def reset_tag_label_cache() -> None:
    """Close and forget the shared tag label cache."""
    global _shared_cache
    async with _shared_lock():
        if _shared_cache is not None:
            await _shared_cache.close()
            _shared_cache = None
