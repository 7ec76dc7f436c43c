"""Data insight entities."""

from .data_insight_chart_type import DataInsightChartType
from .data_insight_chart_result import DataInsightChartResult
from .percentage_of_services_with_owner import PercentageOfServicesWithOwner

__all__ = [
    "DataInsightChartType",
    "DataInsightChartResult",
    "PercentageOfServicesWithOwner",
]
