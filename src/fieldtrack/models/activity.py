"""Activity models.

An activity is one recorded trip or assignment. Once written it is treated
as a historical fact: when the driver, vehicle or location of a trip
changes, callers record a new activity instead of editing the old one.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field, field_validator

from fieldtrack.models._base import RecordModel, RecordParams
from fieldtrack.normalize import non_negative_or_zero, parse_iso_date, safe_str


class Activity(RecordModel):
    """A stored activity.

    ``revenue`` is always a non-negative float here; missing or malformed
    stored values read as ``0.0``. ``date`` is kept as the stored string so
    lexicographic range filters see exactly what was persisted.
    """

    driver_id: str = ""
    vehicle_id: str = ""
    location: str = ""
    date: str = ""
    revenue: float = 0.0

    @field_validator("driver_id", "vehicle_id", "location", "date", mode="before")
    @classmethod
    def _coerce_str(cls, value: Any) -> str:
        return safe_str(value)

    @field_validator("revenue", mode="before")
    @classmethod
    def _coerce_revenue(cls, value: Any) -> float:
        return non_negative_or_zero(value)


class NewActivityParams(RecordParams):
    driver_id: str
    vehicle_id: str
    location: str = ""
    date: str
    revenue: float = Field(default=0.0, ge=0)

    @field_validator("driver_id", "vehicle_id")
    @classmethod
    def _require_reference(cls, value: str) -> str:
        if not value:
            raise ValueError("reference must be non-empty")
        return value

    @field_validator("date")
    @classmethod
    def _require_iso_date(cls, value: str) -> str:
        if parse_iso_date(value) is None:
            raise ValueError("date must be an ISO date (YYYY-MM-DD)")
        return value

    @field_validator("location", mode="before")
    @classmethod
    def _none_to_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("revenue", mode="before")
    @classmethod
    def _blank_revenue(cls, value: Any) -> Any:
        if value is None or value == "":
            return 0.0
        return value


class ActivityUpdate(NewActivityParams):
    """Partial activity edit; only supplied fields are merged."""

    driver_id: str = ""
    vehicle_id: str = ""
    date: str = ""
