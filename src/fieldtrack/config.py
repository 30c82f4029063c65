"""Library configuration for fieldtrack."""

from __future__ import annotations

import dataclasses
import os
from pathlib import Path
from typing import Any

from fieldtrack._constants import (
    ACTIVITIES_KEY,
    DRIVERS_KEY,
    EXPORT_FILENAME,
    MONTH_DAYS,
    VEHICLES_KEY,
    WEEK_DAYS,
)
from fieldtrack.exceptions import FieldTrackConfigError


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


def _env_int(name: str, value: str) -> int:
    try:
        parsed = int(value)
    except ValueError as exc:
        raise FieldTrackConfigError(f"{name} must be an integer, got {value!r}") from exc
    if parsed < 0:
        raise FieldTrackConfigError(f"{name} must not be negative, got {parsed}")
    return parsed


def _default_data_dir() -> Path:
    return Path.home() / ".fieldtrack"


@dataclasses.dataclass(frozen=True)
class CollectionKeys:
    """Storage keys of the three persisted collections.

    Keys are application-scoped and not versioned; the schema version only
    lives in the export document.
    """

    drivers: str = DRIVERS_KEY
    vehicles: str = VEHICLES_KEY
    activities: str = ACTIVITIES_KEY


@dataclasses.dataclass(frozen=True)
class FieldTrackConfig:
    """Library configuration.

    Parameters
    ----------
    data_dir : Path
        Directory used by the file-backed store.
    keys : CollectionKeys
        Storage keys for drivers, vehicles and activities.
    export_filename : str
        File name used when an export is written into a directory.
    week_days : int
        Window of the weekly summary, in days.
    month_days : int
        Window of the monthly summary, in days.
    include_future_dated : bool
        Count activities dated after the reference instant in the weekly
        and monthly windows.
    currency : str
        Currency label used by the command-line reports.
    """

    data_dir: Path = dataclasses.field(default_factory=_default_data_dir)
    keys: CollectionKeys = dataclasses.field(default_factory=CollectionKeys)
    export_filename: str = EXPORT_FILENAME
    week_days: int = WEEK_DAYS
    month_days: int = MONTH_DAYS
    include_future_dated: bool = True
    currency: str = "GHS"

    @classmethod
    def from_env(cls, **overrides: Any) -> FieldTrackConfig:
        """Create configuration from ``FIELDTRACK_*`` environment variables.

        Explicit keyword arguments override environment values.

        Raises
        ------
        FieldTrackConfigError
            When a numeric variable does not parse.
        """
        env = os.environ

        key_kwargs: dict[str, str] = {}
        _ENV_KEY_MAP = {
            "FIELDTRACK_DRIVERS_KEY": "drivers",
            "FIELDTRACK_VEHICLES_KEY": "vehicles",
            "FIELDTRACK_ACTIVITIES_KEY": "activities",
        }
        for env_key, field_name in _ENV_KEY_MAP.items():
            val = env.get(env_key)
            if val:
                key_kwargs[field_name] = val

        key_overrides = overrides.pop("keys", None)
        if isinstance(key_overrides, dict):
            key_kwargs.update(key_overrides)
        elif isinstance(key_overrides, CollectionKeys):
            key_kwargs = dataclasses.asdict(key_overrides)

        config_kwargs: dict[str, Any] = {"keys": CollectionKeys(**key_kwargs)}

        data_dir = env.get("FIELDTRACK_DATA_DIR")
        if data_dir:
            config_kwargs["data_dir"] = Path(data_dir).expanduser()

        for env_key, field_name in (
            ("FIELDTRACK_EXPORT_FILENAME", "export_filename"),
            ("FIELDTRACK_CURRENCY", "currency"),
        ):
            val = env.get(env_key)
            if val:
                config_kwargs[field_name] = val

        for env_key, field_name in (
            ("FIELDTRACK_WEEK_DAYS", "week_days"),
            ("FIELDTRACK_MONTH_DAYS", "month_days"),
        ):
            val = env.get(env_key)
            if val is not None and field_name not in overrides:
                config_kwargs[field_name] = _env_int(env_key, val)

        if "include_future_dated" not in overrides:
            config_kwargs["include_future_dated"] = _env_bool(
                env.get("FIELDTRACK_INCLUDE_FUTURE_DATED"),
                True,
            )

        if "data_dir" in overrides:
            overrides["data_dir"] = Path(overrides["data_dir"])

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
