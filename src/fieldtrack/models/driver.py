"""Driver models."""

from __future__ import annotations

from typing import Any

from pydantic import field_validator

from fieldtrack.models._base import RecordModel, RecordParams
from fieldtrack.normalize import safe_str


class Driver(RecordModel):
    """A driver.

    ``assigned_vehicle_id`` is a weak reference; an empty or dangling id
    reads as "unassigned".
    """

    name: str = ""
    assigned_vehicle_id: str = ""

    @field_validator("name", "assigned_vehicle_id", mode="before")
    @classmethod
    def _coerce_str(cls, value: Any) -> str:
        return safe_str(value)


class NewDriverParams(RecordParams):
    name: str
    assigned_vehicle_id: str = ""

    @field_validator("name")
    @classmethod
    def _require_name(cls, value: str) -> str:
        if not value:
            raise ValueError("name must be non-empty")
        return value

    @field_validator("assigned_vehicle_id", mode="before")
    @classmethod
    def _none_to_empty(cls, value: Any) -> Any:
        return "" if value is None else value


class DriverUpdate(NewDriverParams):
    """Partial driver edit; only supplied fields are merged."""

    name: str = ""
