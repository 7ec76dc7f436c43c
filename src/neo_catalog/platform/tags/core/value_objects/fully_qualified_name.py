"""Fully qualified name helpers.

ONLY FQN handling - splitting, building and quoting of period-delimited
fully qualified names such as ``Classification.Tag.SubTag``.

Names that themselves contain the separator are wrapped in double quotes,
e.g. ``Glossary."term.with.dots".child``.

Following maximum separation architecture - one file = one purpose.
"""

from typing import List, Optional, Sequence

from .....core.exceptions import InvalidArgumentError


class FullyQualifiedName:
    """Static helpers for fully qualified names."""

    SEPARATOR = "."
    QUOTE = '"'

    @classmethod
    def quote_name(cls, name: str) -> str:
        """Quote a single name part if it contains the separator.

        An already quoted name without a separator inside is unquoted.
        """
        if not name:
            raise InvalidArgumentError("Name must not be empty", argument="name", value=name)

        quoted = len(name) > 1 and name.startswith(cls.QUOTE) and name.endswith(cls.QUOTE)
        inner = name[1:-1] if quoted else name
        if cls.QUOTE in inner:
            raise InvalidArgumentError(f"Invalid name {name}", argument="name", value=name)

        if cls.SEPARATOR in inner:
            return f"{cls.QUOTE}{inner}{cls.QUOTE}"
        return inner

    @classmethod
    def unquote_name(cls, name: str) -> str:
        """Strip surrounding quotes from a name part."""
        if len(name) > 1 and name.startswith(cls.QUOTE) and name.endswith(cls.QUOTE):
            return name[1:-1]
        return name

    @classmethod
    def build(cls, *names: str) -> str:
        """Build a fully qualified name from its parts."""
        return cls.SEPARATOR.join(cls.quote_name(name) for name in names)

    @classmethod
    def split(cls, fqn: str) -> List[str]:
        """Split a fully qualified name into its parts.

        Quoted parts keep their quotes so that joining the result
        reproduces the input.
        """
        if not fqn:
            raise InvalidArgumentError("Fully qualified name must not be empty", argument="fqn", value=fqn)

        parts: List[str] = []
        current: List[str] = []
        in_quotes = False

        for char in fqn:
            if char == cls.QUOTE:
                in_quotes = not in_quotes
                current.append(char)
            elif char == cls.SEPARATOR and not in_quotes:
                parts.append(cls._close_part(fqn, current))
                current = []
            else:
                current.append(char)

        if in_quotes:
            raise InvalidArgumentError(f"Invalid fully qualified name {fqn}", argument="fqn", value=fqn)
        parts.append(cls._close_part(fqn, current))
        return parts

    @classmethod
    def get_parent_fqn(cls, parts: Sequence[str]) -> Optional[str]:
        """Parent FQN of already split parts, None for a root name."""
        if len(parts) < 2:
            return None
        return cls.SEPARATOR.join(parts[:-1])

    @classmethod
    def get_parent(cls, fqn: str) -> Optional[str]:
        """Parent FQN of a fully qualified name, None for a root name."""
        return cls.get_parent_fqn(cls.split(fqn))

    @classmethod
    def _close_part(cls, fqn: str, chars: List[str]) -> str:
        part = "".join(chars)
        if not part or part == cls.QUOTE * 2:
            raise InvalidArgumentError(f"Invalid fully qualified name {fqn}", argument="fqn", value=fqn)
        return part
