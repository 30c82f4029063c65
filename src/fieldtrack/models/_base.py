"""Base models for persisted records and caller-supplied parameters.

Stored records are plain camelCase JSON objects. :class:`RecordModel`
exposes them with snake_case attributes via ``alias_generator=to_camel``
and keeps the stored dict in ``raw``, so keys the model does not know about
(for example from a legacy import) stay reachable.

:class:`RecordParams` is the validating counterpart used for writes; its
:meth:`~RecordParams.to_record_patch` returns the camelCase keys to merge
into a stored record.
"""

from __future__ import annotations

from typing import Any, Self

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator
from pydantic.alias_generators import to_camel

from fieldtrack.exceptions import FieldTrackValidationError
from fieldtrack.normalize import safe_str


class RecordModel(BaseModel):
    """Read-side view of a stored record."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        alias_generator=to_camel,
    )

    id: str = ""
    raw: dict[str, Any] = Field(default_factory=dict, exclude=True)
    """Stored record exactly as loaded."""

    @model_validator(mode="before")
    @classmethod
    def _ensure_raw(cls, values: Any) -> Any:
        if not isinstance(values, dict):
            return values
        merged = dict(values)
        merged["raw"] = dict(values)
        return merged

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value: Any) -> str:
        return safe_str(value)


class RecordParams(BaseModel):
    """Base class for validated write parameters."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        populate_by_name=True,
        alias_generator=to_camel,
        loc_by_alias=False,
        str_strip_whitespace=True,
        allow_inf_nan=False,
    )

    @classmethod
    def parse(cls, **fields: Any) -> Self:
        """Validate *fields*, raising :class:`FieldTrackValidationError`."""
        try:
            return cls.model_validate(fields)
        except ValidationError as exc:
            error = exc.errors()[0]
            location = ".".join(str(part) for part in error.get("loc", ()))
            raise FieldTrackValidationError(
                f"{location or cls.__name__}: {error.get('msg', 'invalid value')}",
                field=location,
            ) from exc

    def to_record_patch(self) -> dict[str, Any]:
        """Return the explicitly supplied fields keyed by their stored names."""
        return self.model_dump(by_alias=True, exclude_unset=True)
