"""Customer service helpers."""

from .eligibility import customer_distance, filter_eligible, is_eligible, to_eligible
from .service import (
    EligibleCustomersService,
    RunState,
    get_eligible_customers,
    sort_customers,
)

__all__ = [
    "EligibleCustomersService",
    "RunState",
    "get_eligible_customers",
    "sort_customers",
    "customer_distance",
    "filter_eligible",
    "is_eligible",
    "to_eligible",
]
