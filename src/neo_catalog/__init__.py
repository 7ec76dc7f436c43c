"""neo-catalog - catalog label caching and data insight aggregation.

Shared building blocks for the metadata catalog services:
- Tag label cache resolving tags, classifications, glossaries and glossary terms
- Data insight aggregators flattening search aggregation results
"""

from .__version__ import __version__
from .core.exceptions import (
    NeoCatalogError,
    EntityNotFoundError,
    InvalidArgumentError,
    DateParseError,
)

__all__ = [
    "__version__",
    "NeoCatalogError",
    "EntityNotFoundError",
    "InvalidArgumentError",
    "DateParseError",
]
