"""Data insight chart type.

ONLY chart type identifiers - the tag carried by every chart result so the
presentation layer knows how to render its data.

Following maximum separation architecture - one file = one purpose.
"""

from enum import Enum


class DataInsightChartType(str, Enum):
    """Data insight chart types."""

    PERCENTAGE_OF_SERVICES_WITH_OWNER = "PercentageOfServicesWithOwner"
