"""Export document and import result models."""

from __future__ import annotations

import json
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_serializer
from pydantic.alias_generators import to_camel

from fieldtrack._constants import EXPORT_VERSION


class ExportDocument(BaseModel):
    """A complete point-in-time copy of all three collections.

    Serialized form::

        {"drivers": [...], "vehicles": [...], "activities": [...],
         "exportedAt": "2026-01-12T09:30:00+00:00", "version": 2}
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )

    drivers: list[dict[str, Any]] = Field(default_factory=list)
    vehicles: list[dict[str, Any]] = Field(default_factory=list)
    activities: list[dict[str, Any]] = Field(default_factory=list)
    exported_at: datetime
    version: int = EXPORT_VERSION

    @field_serializer("exported_at")
    def _serialize_exported_at(self, value: datetime) -> str:
        return value.isoformat()

    def to_document(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)

    def to_json(self) -> str:
        """Pretty-printed JSON text of the document."""
        return json.dumps(self.to_document(), indent=2, ensure_ascii=False)


class ImportResult(BaseModel):
    """Collections written to the store by an import."""

    model_config = ConfigDict(frozen=True)

    drivers: list[Any] = Field(default_factory=list)
    vehicles: list[Any] = Field(default_factory=list)
    activities: list[Any] = Field(default_factory=list)
    legacy: bool = False
    """``True`` when activities were read from the legacy ``routes`` field."""
