"""Entity type names.

ONLY entity type identifiers - names of the catalog entity types whose
records are resolved by the label cache.

Following maximum separation architecture - one file = one purpose.
"""

from enum import Enum


class EntityType(str, Enum):
    """Catalog entity types used for labeling."""

    TAG = "tag"
    CLASSIFICATION = "classification"
    GLOSSARY = "glossary"
    GLOSSARY_TERM = "glossaryTerm"

    def __str__(self) -> str:
        return self.value


LABEL_ENTITY_TYPES = (
    EntityType.CLASSIFICATION,
    EntityType.TAG,
    EntityType.GLOSSARY,
    EntityType.GLOSSARY_TERM,
)
