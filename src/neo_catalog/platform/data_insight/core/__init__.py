"""Data insight core domain layer."""

from .entities import *

__all__ = [
    "DataInsightChartType",
    "DataInsightChartResult",
    "PercentageOfServicesWithOwner",
]
