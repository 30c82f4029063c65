"""Vehicle models."""

from __future__ import annotations

from typing import Any

from pydantic import field_validator

from fieldtrack.models._base import RecordModel, RecordParams
from fieldtrack.normalize import safe_str


class Vehicle(RecordModel):
    """A vehicle, identified to people by its ``label`` (e.g. a plate)."""

    label: str = ""

    @field_validator("label", mode="before")
    @classmethod
    def _coerce_label(cls, value: Any) -> str:
        return safe_str(value)


class NewVehicleParams(RecordParams):
    label: str

    @field_validator("label")
    @classmethod
    def _require_label(cls, value: str) -> str:
        if not value:
            raise ValueError("label must be non-empty")
        return value
