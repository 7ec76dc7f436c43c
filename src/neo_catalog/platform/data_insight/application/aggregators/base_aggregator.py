"""Data insight aggregator base.

ONLY shared aggregation plumbing - access to search-engine aggregation
results, date key conversion and envelope building for concrete
data insight aggregators.

Following maximum separation architecture - one file = one purpose.
"""

import math
from abc import ABC, abstractmethod
from datetime import datetime, timedelta, timezone
from typing import Any, List, Mapping, Optional, Sequence

from .....config.settings import get_settings
from .....core.exceptions import DateParseError, InvalidFormatError
from ...core.entities.data_insight_chart_result import DataInsightChartResult
from ...core.entities.data_insight_chart_type import DataInsightChartType

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

# strptime's complaint about text left over after a full format match
_UNCONVERTED_DATA = "unconverted data remains: "


class DataInsightAggregator(ABC):
    """Base class for data insight aggregators.

    Consumes the ``aggregations`` part of a search response, i.e. a mapping
    of aggregation name to result, where multi-bucket results look like
    ``{"buckets": [{"key": ..., "key_as_string": ..., <sub-aggregations>}]}``
    and metric results look like ``{"value": 3.0}``.
    """

    # Aggregation names shared with the query builders
    TIMESTAMP = "timestamp"
    SERVICE_NAME = "serviceName"
    HAS_OWNER_FRACTION = "hasOwnerFraction"
    ENTITY_COUNT = "entityCount"

    def __init__(
        self,
        aggregations: Mapping[str, Any],
        chart_type: DataInsightChartType,
        date_format: Optional[str] = None
    ):
        """Initialize aggregator.

        Args:
            aggregations: Aggregation results of the search response
            chart_type: Chart type tag of the produced result
            date_format: strptime format of histogram bucket keys
        """
        self.aggregations = aggregations
        self.chart_type = chart_type
        self.date_format = date_format or get_settings().data_insight_date_format

    def process(self) -> DataInsightChartResult:
        """Aggregate and wrap the records in a chart result."""
        data = self.aggregate()
        return DataInsightChartResult(chart_type=self.chart_type, data=data)

    @abstractmethod
    def aggregate(self) -> List[Any]:
        """Flatten the aggregation result into chart records."""
        ...

    def convert_date_time_string_to_timestamp(self, date_time_string: Any) -> int:
        """Parse a bucket key into epoch milliseconds (UTC unless zoned).

        The key must start with a value matching ``date_format``; anything
        after it is ignored, so ``2023-01-01T00:00:00.000Z`` reads as
        ``2023-01-01`` under the default format.
        """
        if not isinstance(date_time_string, str):
            raise DateParseError(str(date_time_string), self.date_format)
        leading = date_time_string
        try:
            try:
                parsed = datetime.strptime(leading, self.date_format)
            except ValueError as e:
                message = str(e)
                if not message.startswith(_UNCONVERTED_DATA):
                    raise
                leading = leading[:len(leading) - len(message) + len(_UNCONVERTED_DATA)]
                parsed = datetime.strptime(leading, self.date_format)
        except ValueError as e:
            raise DateParseError(date_time_string, self.date_format) from e
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=timezone.utc)
        return (parsed - _EPOCH) // timedelta(milliseconds=1)

    @staticmethod
    def get_buckets(aggregations: Mapping[str, Any], name: str) -> Sequence[Mapping[str, Any]]:
        """Buckets of a named multi-bucket aggregation."""
        try:
            return aggregations[name]["buckets"]
        except (KeyError, TypeError) as e:
            raise InvalidFormatError(
                f"Missing bucket aggregation {name}",
                details={"aggregation": name},
            ) from e

    @staticmethod
    def get_metric_value(bucket: Mapping[str, Any], name: str) -> float:
        """Value of a named single-value metric aggregation."""
        try:
            value = bucket[name]["value"]
        except (KeyError, TypeError) as e:
            raise InvalidFormatError(
                f"Missing metric aggregation {name}",
                details={"aggregation": name},
            ) from e
        # Empty sums come back as null
        return 0.0 if value is None else float(value)

    @staticmethod
    def divide(numerator: float, denominator: float) -> float:
        """IEEE-754 division: x/0 is +-inf, 0/0 is nan, never raises."""
        if denominator == 0:
            if numerator == 0 or math.isnan(numerator):
                return math.nan
            return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
        return numerator / denominator
