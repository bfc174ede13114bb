"""Distance based eligibility checks for customer records."""

from __future__ import annotations

import logging
from typing import Iterable

from ...errors import RecordProcessingError
from ...models.domain import CustomerRecord, EligibleCustomer
from ...schemas.customers import RunConfig
from ..geospatial import distance_between

logger = logging.getLogger(__name__)


def customer_distance(record: CustomerRecord, config: RunConfig) -> float:
    source = config.source_coordinates.to_coordinate()
    return distance_between(
        source.latitude,
        source.longitude,
        float(record.latitude),
        float(record.longitude),
        config.distance_unit,
    )


def is_eligible(record: CustomerRecord, config: RunConfig) -> bool:
    """Return True when the customer lies within ``config.distance`` (inclusive)."""

    return customer_distance(record, config) <= config.distance


def to_eligible(record: CustomerRecord) -> EligibleCustomer:
    return EligibleCustomer(user_id=record.user_id, name=record.name)


def filter_eligible(records: Iterable[CustomerRecord], config: RunConfig) -> list[EligibleCustomer]:
    """Apply the distance filter to ``records`` in order.

    A record that cannot be evaluated (missing or non-numeric coordinates) is
    skipped, or raises ``RecordProcessingError`` when the run is strict.
    """

    eligible: list[EligibleCustomer] = []
    for record in records:
        try:
            keep = is_eligible(record, config)
        except Exception as exc:
            if config.strict:
                raise RecordProcessingError(record, record.label) from exc
            logger.debug("Skipping customer %s on line %d: %s", record.label, record.line_index, exc)
            continue
        if keep:
            eligible.append(to_eligible(record))
    return eligible
