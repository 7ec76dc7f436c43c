"""Tag label platform module.

Resolves tag labels to the tags, classifications, glossaries and glossary
terms they refer to, through bounded time-expiring lookup caches.

Usage:

```python
from neo_catalog.platform.tags import TagLabelCache, TagLabel, EntityType

cache = TagLabelCache({
    EntityType.TAG: tag_repository,
    EntityType.CLASSIFICATION: classification_repository,
    EntityType.GLOSSARY: glossary_repository,
    EntityType.GLOSSARY_TERM: glossary_term_repository,
})
await cache.initialize()

exclusive = await cache.is_mutually_exclusive(TagLabel.classification("PII.Sensitive"))
```
"""

from .core import *
from .application import *

__all__ = [
    # Core
    "EntityType",
    "LABEL_ENTITY_TYPES",
    "TagLabel",
    "TagSource",
    "CacheSpec",
    "Fields",
    "FullyQualifiedName",
    "EntityRepository",
    "LabelEntity",

    # Application
    "TagLabelCache",
    "get_tag_label_cache",
    "reset_tag_label_cache",
]
