"""Entity repository protocol.

ONLY repository contract - the by-name lookup the label cache needs
from the persistent repositories backing each entity type.

Following maximum separation architecture - one file = one purpose.
"""

from typing import Any, Optional
from typing_extensions import Protocol, runtime_checkable

from ..value_objects.fields import Fields


@runtime_checkable
class LabelEntity(Protocol):
    """Minimal shape of a tag, classification, glossary or glossary term."""

    id: Any
    name: str
    fully_qualified_name: str
    description: Optional[str]
    mutually_exclusive: Optional[bool]


@runtime_checkable
class EntityRepository(Protocol):
    """Repository protocol for entities addressable by fully qualified name."""

    async def get_by_name(
        self,
        context: Optional[Any],
        name: str,
        fields: Fields
    ) -> LabelEntity:
        """Get entity by fully qualified name.

        Raises when the entity does not exist or the backing store fails.
        """
        ...
