"""High-level orchestration for eligible customer runs."""

from __future__ import annotations

import functools
import logging
import math
from enum import Enum
from typing import Any, Mapping, Sequence

from ...config import settings
from ...data.customers_repository import ingest_customers
from ...errors import raise_classified
from ...models.domain import CustomerRecord, EligibleCustomer, SortDirection
from ...schemas.customers import RunConfig, build_run_config
from .eligibility import filter_eligible

logger = logging.getLogger(__name__)


class RunState(str, Enum):
    IDLE = "idle"
    INGESTING = "ingesting"
    FILTERING = "filtering"
    SORTING = "sorting"
    DONE = "done"
    FAILED = "failed"


def _as_number(value: Any) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return math.nan


def sort_customers(
    customers: Sequence[EligibleCustomer],
    field: str,
    direction: SortDirection | str = SortDirection.ASC,
) -> list[EligibleCustomer]:
    """Stable sort by the numeric difference of ``field``.

    Values that are not numeric compare as equal to everything, so sorting on a
    text field leaves the order undefined.
    """

    sign = -1 if direction == SortDirection.DESC else 1

    def compare(left: EligibleCustomer, right: EligibleCustomer) -> int:
        difference = _as_number(getattr(left, field, None)) - _as_number(getattr(right, field, None))
        if math.isnan(difference) or difference == 0:
            return 0
        return sign if difference > 0 else -sign

    return sorted(customers, key=functools.cmp_to_key(compare))


class EligibleCustomersService:
    """Reads customers, keeps the ones close enough to the source point and sorts them.

    One instance may serve several runs one after another; per-run state is
    reset at the start of every run. Overlapping runs on the same instance are
    not supported.
    """

    def __init__(
        self,
        *,
        defaults: Mapping[str, Any] | None = None,
        show_unhandled_exceptions: bool | None = None,
    ) -> None:
        self.defaults = defaults
        self.show_unhandled_exceptions = (
            settings.show_unhandled_exceptions if show_unhandled_exceptions is None else show_unhandled_exceptions
        )
        self._reset()

    def _reset(self) -> None:
        self.state = RunState.IDLE
        self.config: RunConfig | None = None
        self.customers: list[CustomerRecord] = []
        self.eligible_customers: list[EligibleCustomer] = []
        self.failed_lines: list[int] = []

    async def get_eligible_customers(self, overrides: Any = None) -> list[EligibleCustomer]:
        """Run the pipeline with ``overrides`` merged over the defaults.

        Every failure leaves the service in ``RunState.FAILED`` and reaches the
        caller classified: application errors unchanged, unexpected errors
        verbatim in debug posture and masked otherwise.
        """

        self._reset()
        try:
            self.config = build_run_config(overrides, self.defaults)
        except Exception as exc:
            self.state = RunState.FAILED
            raise_classified("Invalid configurations provided", exc, show_unhandled=self.show_unhandled_exceptions)

        try:
            return await self._run(self.config)
        except Exception as exc:
            self.state = RunState.FAILED
            self.eligible_customers = []
            raise_classified(
                "Error in getting eligible customers list", exc, show_unhandled=self.show_unhandled_exceptions
            )

    async def _run(self, config: RunConfig) -> list[EligibleCustomer]:
        logger.info(
            "Finding customers within %s %s of (%s, %s) in %s",
            config.distance,
            config.distance_unit.value,
            config.source_coordinates.latitude,
            config.source_coordinates.longitude,
            config.file_path,
        )
        self.state = RunState.INGESTING
        ingestion = await ingest_customers(config.file_path, strict=config.strict)
        self.customers = ingestion.records
        self.failed_lines = ingestion.failed_lines

        self.state = RunState.FILTERING
        self.eligible_customers = filter_eligible(self.customers, config)

        self.state = RunState.SORTING
        self.eligible_customers = sort_customers(
            self.eligible_customers, config.customer_sorting_field, config.sorting_type
        )

        self.state = RunState.DONE
        logger.info(
            "%d of %d customer(s) eligible", len(self.eligible_customers), len(self.customers)
        )
        return list(self.eligible_customers)


_default_service: EligibleCustomersService | None = None


def _get_default_service() -> EligibleCustomersService:
    global _default_service
    if _default_service is None:
        _default_service = EligibleCustomersService()
    return _default_service


async def get_eligible_customers(overrides: Any = None) -> list[EligibleCustomer]:
    """Run the pipeline on the shared default service."""

    return await _get_default_service().get_eligible_customers(overrides)
