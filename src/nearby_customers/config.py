"""Application configuration and settings management."""

from pathlib import Path
from typing import Any, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

PROJECT_ROOT = Path(__file__).resolve().parents[2]


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables or defaults."""

    model_config = SettingsConfigDict(
        env_prefix="NEARBY_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    app_name: str = "Nearby Customers API"
    api_prefix: str = "/api"
    customer_file: Path = Field(
        default=PROJECT_ROOT / "data" / "customers.txt",
        description="Line-delimited customer dataset, one JSON object per line.",
    )
    source_latitude: float = Field(default=53.339428, description="Latitude of the office customers are measured from.")
    source_longitude: float = Field(default=-6.257664, description="Longitude of the office customers are measured from.")
    distance_unit: Literal["KM", "MI"] = Field(default="KM")
    max_distance: float = Field(default=100.0, ge=0.0, description="Inclusive distance threshold in distance_unit.")
    sort_field: str = Field(default="user_id")
    sort_direction: Literal["ASC", "DESC"] = Field(default="ASC")
    strict_line_errors: bool = Field(
        default=False,
        description="Abort the whole run when a line or a customer fails to process.",
    )
    # Process-wide posture, not overridable per call.
    show_unhandled_exceptions: bool = Field(
        default=False,
        description="Surface unexpected errors verbatim instead of masking them (debugging).",
    )

    @field_validator("customer_file", mode="before")
    @classmethod
    def _expand_path(cls, value: Any) -> Path:
        path_value = value if isinstance(value, Path) else Path(str(value))
        return path_value.expanduser().resolve()

    @field_validator("distance_unit", "sort_direction", mode="before")
    @classmethod
    def _upper(cls, value: Any) -> Any:
        return value.strip().upper() if isinstance(value, str) else value


settings = Settings()
