"""Field selector value object.

ONLY field selection - the set of relation fields a repository should
populate when loading an entity.

Following maximum separation architecture - one file = one purpose.
"""

from dataclasses import dataclass, field
from typing import ClassVar, FrozenSet, Iterable


@dataclass(frozen=True)
class Fields:
    """Requested entity fields. ``Fields.EMPTY`` asks for no relations."""

    names: FrozenSet[str] = field(default_factory=frozenset)

    EMPTY: ClassVar["Fields"]

    @classmethod
    def of(cls, names: Iterable[str]) -> "Fields":
        return cls(frozenset(names))

    def contains(self, name: str) -> bool:
        return name in self.names

    def __len__(self) -> int:
        return len(self.names)


Fields.EMPTY = Fields()
