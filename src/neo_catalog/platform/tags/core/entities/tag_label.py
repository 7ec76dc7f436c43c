"""Tag label entity.

ONLY tag label - reference from a labeled asset to a classification tag
or a glossary term.

Following maximum separation architecture - one file = one purpose.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class TagSource(str, Enum):
    """Where a tag label comes from."""

    CLASSIFICATION = "Classification"
    GLOSSARY = "Glossary"


@dataclass(frozen=True)
class TagLabel:
    """Tag label applied to an asset.

    ``source`` is normally a ``TagSource``; anything else is rejected by
    consumers with an invalid-argument error.
    """

    tag_fqn: str
    source: Union[TagSource, str]
    description: Optional[str] = None

    @classmethod
    def classification(cls, tag_fqn: str) -> "TagLabel":
        """Create a label pointing to a classification tag."""
        return cls(tag_fqn=tag_fqn, source=TagSource.CLASSIFICATION)

    @classmethod
    def glossary(cls, term_fqn: str) -> "TagLabel":
        """Create a label pointing to a glossary term."""
        return cls(tag_fqn=term_fqn, source=TagSource.GLOSSARY)
