from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

import pytest

from fieldtrack.config import FieldTrackConfig
from fieldtrack.store import MemoryBackend
from fieldtrack.tracker import FieldTracker

NOW = datetime(2026, 1, 12, 10, 0, tzinfo=UTC)

DRIVERS: list[dict[str, Any]] = [{"id": "drv-1", "name": "Ama", "assignedVehicleId": "veh-1"}]
VEHICLES: list[dict[str, Any]] = [{"id": "veh-1", "label": "GT-1234"}]
ACTIVITIES: list[dict[str, Any]] = [
    {
        "id": "act-1",
        "driverId": "drv-1",
        "vehicleId": "veh-1",
        "location": "Accra",
        "date": "2026-01-10",
        "revenue": 150,
    },
    {
        "id": "act-2",
        "driverId": "drv-1",
        "vehicleId": "veh-1",
        "location": "Kumasi",
        "date": "2026-01-12",
        "revenue": 200,
    },
]


@pytest.fixture
def backend() -> MemoryBackend:
    return MemoryBackend()


@pytest.fixture
def config(tmp_path: Any) -> FieldTrackConfig:
    return FieldTrackConfig(data_dir=tmp_path)


@pytest.fixture
def tracker(config: FieldTrackConfig, backend: MemoryBackend) -> FieldTracker:
    return FieldTracker(config, backend=backend, clock=lambda: NOW)


@pytest.fixture
def seeded(tracker: FieldTracker) -> FieldTracker:
    keys = tracker.config.keys
    tracker.store.save(keys.drivers, DRIVERS)
    tracker.store.save(keys.vehicles, VEHICLES)
    tracker.store.save(keys.activities, ACTIVITIES)
    return tracker


@pytest.fixture
def now() -> datetime:
    return NOW
