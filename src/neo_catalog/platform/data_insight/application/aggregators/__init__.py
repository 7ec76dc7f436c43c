"""Data insight aggregators."""

from .base_aggregator import DataInsightAggregator
from .services_owner_aggregator import ServicesOwnerAggregator
from .aggregator_factory import DataInsightAggregatorFactory

__all__ = [
    "DataInsightAggregator",
    "ServicesOwnerAggregator",
    "DataInsightAggregatorFactory",
]
