"""Load result.

ONLY load outcome - explicit value-or-failure result returned by the
loading cache, so callers translate failures without catching a
generic wrapper exception.

Following maximum separation architecture - one file = one purpose.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

from .....core.exceptions import ResourceNotFoundError

V = TypeVar("V")


class LoadFailureKind(str, Enum):
    """Why a load failed."""

    NOT_FOUND = "not_found"
    BACKEND_ERROR = "backend_error"


@dataclass(frozen=True)
class LoadFailure:
    """Failed load of a single key."""

    key: str
    kind: LoadFailureKind
    error: BaseException

    @classmethod
    def from_exception(cls, key: str, error: BaseException) -> "LoadFailure":
        if isinstance(error, (ResourceNotFoundError, LookupError)):
            kind = LoadFailureKind.NOT_FOUND
        else:
            kind = LoadFailureKind.BACKEND_ERROR
        return cls(key=key, kind=kind, error=error)


@dataclass(frozen=True)
class LoadResult(Generic[V]):
    """Either a loaded value or a load failure."""

    value: Optional[V] = None
    failure: Optional[LoadFailure] = None

    @classmethod
    def loaded(cls, value: V) -> "LoadResult[V]":
        return cls(value=value)

    @classmethod
    def failed(cls, failure: LoadFailure) -> "LoadResult[V]":
        return cls(failure=failure)

    @property
    def ok(self) -> bool:
        return self.failure is None
