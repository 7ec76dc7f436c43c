"""Services owner aggregator.

ONLY ownership aggregation - turns a daily histogram of per-service owner
sums into one ownership record per (day, service) bucket pair.

Following maximum separation architecture - one file = one purpose.
"""

import logging
from typing import Any, List, Mapping, Optional

from ...core.entities.data_insight_chart_type import DataInsightChartType
from ...core.entities.percentage_of_services_with_owner import PercentageOfServicesWithOwner
from .base_aggregator import DataInsightAggregator

logger = logging.getLogger(__name__)


class ServicesOwnerAggregator(DataInsightAggregator):
    """Aggregator for the percentage of services with owner chart.

    Records follow bucket order (day, then service) and are never merged.
    A service bucket with a zero entity count yields an infinite or NaN
    fraction rather than an error.
    """

    def __init__(
        self,
        aggregations: Mapping[str, Any],
        chart_type: DataInsightChartType = DataInsightChartType.PERCENTAGE_OF_SERVICES_WITH_OWNER,
        date_format: Optional[str] = None
    ):
        super().__init__(aggregations, chart_type, date_format)

    def aggregate(self) -> List[PercentageOfServicesWithOwner]:
        data: List[PercentageOfServicesWithOwner] = []
        for timestamp_bucket in self.get_buckets(self.aggregations, self.TIMESTAMP):
            timestamp = self.convert_date_time_string_to_timestamp(timestamp_bucket.get("key_as_string"))
            for service_bucket in self.get_buckets(timestamp_bucket, self.SERVICE_NAME):
                service_name = str(service_bucket.get("key_as_string", service_bucket.get("key")))
                has_owner = self.get_metric_value(service_bucket, self.HAS_OWNER_FRACTION)
                entity_count = self.get_metric_value(service_bucket, self.ENTITY_COUNT)
                data.append(
                    PercentageOfServicesWithOwner(
                        timestamp=timestamp,
                        service_name=service_name,
                        entity_count=entity_count,
                        has_owner=has_owner,
                        has_owner_fraction=self.divide(has_owner, entity_count),
                    )
                )

        logger.debug(f"Aggregated {len(data)} {self.chart_type.value} records")
        return data
