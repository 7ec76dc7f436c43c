"""Data insight platform module.

Post-processes search-engine aggregation results into data insight chart
records.

Usage:

```python
from neo_catalog.platform.data_insight import DataInsightAggregatorFactory, DataInsightChartType

aggregator = DataInsightAggregatorFactory.create(
    DataInsightChartType.PERCENTAGE_OF_SERVICES_WITH_OWNER,
    response["aggregations"],
)
result = aggregator.process()
```
"""

from .core import *
from .application import *

__all__ = [
    # Core
    "DataInsightChartType",
    "DataInsightChartResult",
    "PercentageOfServicesWithOwner",

    # Application
    "DataInsightAggregator",
    "ServicesOwnerAggregator",
    "DataInsightAggregatorFactory",
]
