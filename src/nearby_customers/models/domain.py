"""Domain models for customer records and distance settings."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class DistanceUnit(str, Enum):
    KM = "KM"
    MI = "MI"


class SortDirection(str, Enum):
    ASC = "ASC"
    DESC = "DESC"


@dataclass(frozen=True, slots=True)
class Coordinate:
    """A point on earth in degrees. Range is not validated."""

    latitude: float
    longitude: float


@dataclass(frozen=True, slots=True)
class CustomerRecord:
    """Represents one customer line as read from the data source.

    Coordinates are kept exactly as they appear in the source; the reference
    dataset stores them as strings and they are coerced when distances are
    computed.
    """

    line_index: int
    user_id: Any
    name: Any
    latitude: Any
    longitude: Any
    raw: dict = field(default_factory=dict, compare=False, hash=False)

    @property
    def label(self) -> str:
        return str(self.name) if self.name is not None else f"line {self.line_index}"


@dataclass(frozen=True, slots=True)
class EligibleCustomer:
    """Customer projection returned to callers once it passed the distance filter."""

    user_id: Any
    name: Any

    def as_dict(self) -> dict:
        return {"user_id": self.user_id, "name": self.name}
