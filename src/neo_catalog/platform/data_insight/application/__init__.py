"""Data insight application layer."""

from .aggregators import *

__all__ = [
    "DataInsightAggregator",
    "ServicesOwnerAggregator",
    "DataInsightAggregatorFactory",
]
