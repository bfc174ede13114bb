"""Pydantic models for run configuration and customer responses."""

from __future__ import annotations

from pathlib import Path
from collections.abc import Mapping
from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..config import Settings, settings
from ..errors import InvalidConfigurationError
from ..models.domain import Coordinate, DistanceUnit, SortDirection


class SourceCoordinates(BaseModel):
    model_config = ConfigDict(frozen=True)

    latitude: float
    longitude: float

    def to_coordinate(self) -> Coordinate:
        return Coordinate(latitude=self.latitude, longitude=self.longitude)


class RunConfig(BaseModel):
    """Configuration for one eligibility run.

    Field aliases are the override keys accepted from callers; the snake_case
    names are accepted as well.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    file_path: Path = Field(alias="filePath")
    source_coordinates: SourceCoordinates = Field(alias="sourceCoordinates")
    distance_unit: DistanceUnit = Field(default=DistanceUnit.KM, alias="distanceUnit")
    distance: float = Field(alias="distance")
    customer_sorting_field: str = Field(default="user_id", alias="customerSortingField")
    sorting_type: SortDirection = Field(default=SortDirection.ASC, alias="sortingType")
    show_error_for_failed_customer_processing: bool = Field(
        default=False, alias="showErrorForFailedCustomerProcessing"
    )

    @field_validator("file_path", mode="before")
    @classmethod
    def _expand_path(cls, value: Any) -> Path:
        path_value = value if isinstance(value, Path) else Path(str(value))
        return path_value.expanduser()

    @field_validator("distance_unit", "sorting_type", mode="before")
    @classmethod
    def _upper(cls, value: Any) -> Any:
        return value.strip().upper() if isinstance(value, str) else value

    @property
    def strict(self) -> bool:
        return self.show_error_for_failed_customer_processing


def default_config_values(source: Settings | None = None) -> dict[str, Any]:
    current = source or settings
    return {
        "filePath": current.customer_file,
        "sourceCoordinates": {
            "latitude": current.source_latitude,
            "longitude": current.source_longitude,
        },
        "distanceUnit": current.distance_unit,
        "distance": current.max_distance,
        "customerSortingField": current.sort_field,
        "sortingType": current.sort_direction,
        "showErrorForFailedCustomerProcessing": current.strict_line_errors,
    }


def build_run_config(overrides: Any = None, defaults: Mapping[str, Any] | None = None) -> RunConfig:
    """Merge caller overrides over the defaults into a validated ``RunConfig``."""

    if overrides is None:
        overrides = {}
    if not isinstance(overrides, Mapping):
        raise InvalidConfigurationError("Invalid configurations provided")

    merged = dict(defaults if defaults is not None else default_config_values())
    for key, value in overrides.items():
        # snake_case overrides replace their camelCase default
        alias = _ALIASES.get(key, key)
        merged[alias] = value
    try:
        return RunConfig.model_validate(merged)
    except ValidationError as exc:
        raise InvalidConfigurationError(f"Invalid configurations provided: {exc.error_count()} invalid field(s)") from exc


_ALIASES = {name: field.alias for name, field in RunConfig.model_fields.items() if field.alias}


class EligibleCustomerModel(BaseModel):
    user_id: Any
    name: Any = None


class EligibleCustomersResponse(BaseModel):
    items: List[EligibleCustomerModel]
    total: int


class ErrorResponse(BaseModel):
    code: str
    kind: str
    message: str
