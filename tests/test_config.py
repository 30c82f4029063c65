from __future__ import annotations

from pathlib import Path

import pytest

from fieldtrack.config import CollectionKeys, FieldTrackConfig
from fieldtrack.exceptions import FieldTrackConfigError

_ENV_VARS = (
    "FIELDTRACK_DATA_DIR",
    "FIELDTRACK_DRIVERS_KEY",
    "FIELDTRACK_VEHICLES_KEY",
    "FIELDTRACK_ACTIVITIES_KEY",
    "FIELDTRACK_EXPORT_FILENAME",
    "FIELDTRACK_WEEK_DAYS",
    "FIELDTRACK_MONTH_DAYS",
    "FIELDTRACK_INCLUDE_FUTURE_DATED",
    "FIELDTRACK_CURRENCY",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults() -> None:
    config = FieldTrackConfig.from_env()

    assert config.keys == CollectionKeys("fleet_drivers", "fleet_vehicles", "fleet_activities")
    assert config.export_filename == "fleet-data-export.json"
    assert config.week_days == 7
    assert config.month_days == 30
    assert config.include_future_dated is True
    assert config.currency == "GHS"
    assert config.data_dir == Path.home() / ".fieldtrack"


def test_environment_values(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("FIELDTRACK_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("FIELDTRACK_ACTIVITIES_KEY", "trips")
    monkeypatch.setenv("FIELDTRACK_WEEK_DAYS", "14")
    monkeypatch.setenv("FIELDTRACK_INCLUDE_FUTURE_DATED", "off")
    monkeypatch.setenv("FIELDTRACK_CURRENCY", "USD")

    config = FieldTrackConfig.from_env()

    assert config.data_dir == tmp_path
    assert config.keys.activities == "trips"
    assert config.keys.drivers == "fleet_drivers"
    assert config.week_days == 14
    assert config.include_future_dated is False
    assert config.currency == "USD"


def test_overrides_win(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("FIELDTRACK_WEEK_DAYS", "not-a-number")
    monkeypatch.setenv("FIELDTRACK_INCLUDE_FUTURE_DATED", "false")

    config = FieldTrackConfig.from_env(week_days=10, include_future_dated=True, data_dir=str(tmp_path))

    assert config.week_days == 10
    assert config.include_future_dated is True
    assert config.data_dir == tmp_path


@pytest.mark.parametrize("value", ["seven", "-1"])
def test_bad_integer_raises(monkeypatch: pytest.MonkeyPatch, value: str) -> None:
    monkeypatch.setenv("FIELDTRACK_MONTH_DAYS", value)
    with pytest.raises(FieldTrackConfigError):
        FieldTrackConfig.from_env()


def test_unrecognized_bool_keeps_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FIELDTRACK_INCLUDE_FUTURE_DATED", "maybe")
    assert FieldTrackConfig.from_env().include_future_dated is True


def test_keys_override(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FIELDTRACK_DRIVERS_KEY", "people")

    partial = FieldTrackConfig.from_env(keys={"vehicles": "cars"})
    assert partial.keys == CollectionKeys("people", "cars", "fleet_activities")

    replaced = FieldTrackConfig.from_env(keys=CollectionKeys(drivers="a", vehicles="b", activities="c"))
    assert replaced.keys == CollectionKeys("a", "b", "c")


def test_config_is_frozen() -> None:
    config = FieldTrackConfig()
    with pytest.raises(AttributeError):
        config.currency = "USD"  # type: ignore[misc]
