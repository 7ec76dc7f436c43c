"""Data insight aggregator factory.

ONLY aggregator selection - picks the aggregator implementation for a
chart type.

Following maximum separation architecture - one file = one purpose.
"""

from typing import Any, Dict, Mapping, Optional, Type

from .....core.exceptions import InvalidArgumentError
from ...core.entities.data_insight_chart_type import DataInsightChartType
from .base_aggregator import DataInsightAggregator
from .services_owner_aggregator import ServicesOwnerAggregator


class DataInsightAggregatorFactory:
    """Creates aggregators by chart type."""

    _AGGREGATORS: Dict[DataInsightChartType, Type[DataInsightAggregator]] = {
        DataInsightChartType.PERCENTAGE_OF_SERVICES_WITH_OWNER: ServicesOwnerAggregator,
    }

    @classmethod
    def supported_chart_types(cls) -> list:
        return list(cls._AGGREGATORS)

    @classmethod
    def create(
        cls,
        chart_type: DataInsightChartType,
        aggregations: Mapping[str, Any],
        date_format: Optional[str] = None
    ) -> DataInsightAggregator:
        """Create the aggregator for a chart type.

        Raises:
            InvalidArgumentError: No aggregator handles the chart type
        """
        value = getattr(chart_type, "value", chart_type)
        try:
            chart_type = DataInsightChartType(value)
        except ValueError:
            aggregator_class = None
        else:
            aggregator_class = cls._AGGREGATORS.get(chart_type)

        if aggregator_class is None:
            raise InvalidArgumentError(
                f"Invalid data insight chart type {value}",
                argument="chart_type",
                value=value,
            )
        return aggregator_class(aggregations, chart_type, date_format)
