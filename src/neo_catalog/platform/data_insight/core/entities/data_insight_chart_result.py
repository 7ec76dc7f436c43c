"""Data insight chart result.

ONLY chart result envelope - chart type plus the aggregated records handed
to the presentation layer.

Following maximum separation architecture - one file = one purpose.
"""

from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .data_insight_chart_type import DataInsightChartType


class DataInsightChartResult(BaseModel):
    """Result of one data insight chart aggregation."""

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )

    chart_type: DataInsightChartType
    data: List[Any] = Field(default_factory=list)
