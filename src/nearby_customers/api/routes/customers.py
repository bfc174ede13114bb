"""Eligible customer endpoints."""

from __future__ import annotations

from typing import Any, Literal

from fastapi import APIRouter, Body, Query, status

from ...schemas.customers import EligibleCustomerModel, EligibleCustomersResponse, ErrorResponse
from ...services.customers import EligibleCustomersService

router = APIRouter(prefix="/customers", tags=["customers"])

ERROR_RESPONSES = {
    status.HTTP_404_NOT_FOUND: {"model": ErrorResponse, "description": "Customer file not found"},
    status.HTTP_422_UNPROCESSABLE_ENTITY: {"model": ErrorResponse, "description": "Invalid configuration or unprocessable data"},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse, "description": "Unexpected failure"},
}


async def _run(overrides: Any) -> EligibleCustomersResponse:
    customers = await EligibleCustomersService().get_eligible_customers(overrides)
    return EligibleCustomersResponse(
        items=[EligibleCustomerModel(**customer.as_dict()) for customer in customers],
        total=len(customers),
    )


@router.get(
    "/eligible",
    response_model=EligibleCustomersResponse,
    status_code=status.HTTP_200_OK,
    responses=ERROR_RESPONSES,
)
async def list_eligible_customers(
    distance: float | None = Query(default=None, ge=0, description="Maximum distance from the source point"),
    unit: Literal["KM", "MI"] | None = Query(default=None, description="Distance unit"),
    sort_field: str | None = Query(default=None, description="Field used to order the customers"),
    sort_direction: Literal["ASC", "DESC"] | None = Query(default=None, description="Sort direction"),
) -> EligibleCustomersResponse:
    overrides: dict[str, Any] = {}
    if distance is not None:
        overrides["distance"] = distance
    if unit:
        overrides["distanceUnit"] = unit
    if sort_field:
        overrides["customerSortingField"] = sort_field
    if sort_direction:
        overrides["sortingType"] = sort_direction
    return await _run(overrides)


@router.post(
    "/eligible",
    response_model=EligibleCustomersResponse,
    status_code=status.HTTP_200_OK,
    responses=ERROR_RESPONSES,
)
async def find_eligible_customers(overrides: Any = Body(default=None)) -> EligibleCustomersResponse:
    """Run the eligibility pipeline with the configuration overrides in the request body."""
    return await _run(overrides)
