"""Percentage of services with owner.

ONLY ownership metric record - share of a service's entities that have an
owner, for one day.

Following maximum separation architecture - one file = one purpose.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class PercentageOfServicesWithOwner(BaseModel):
    """Ownership metric for one (timestamp, service) pair.

    ``has_owner_fraction`` is ``has_owner / entity_count`` as computed by
    the aggregator; it is infinite or NaN when ``entity_count`` is zero.
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )

    timestamp: int
    service_name: str
    entity_count: float
    has_owner: float
    has_owner_fraction: float
