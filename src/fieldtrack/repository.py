"""CRUD operations over drivers, vehicles and activities.

Every write is a load -> mutate -> save cycle on a single collection.
Input is validated before the collection is loaded, so a rejected call
never writes anything.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, TypeVar

from fieldtrack._constants import ACTIVITY_ID_PREFIX, DRIVER_ID_PREFIX, VEHICLE_ID_PREFIX
from fieldtrack.config import CollectionKeys
from fieldtrack.ids import new_id
from fieldtrack.legacy import route_patch_to_activity_fields, route_to_activity_fields
from fieldtrack.models.activity import Activity, ActivityUpdate, NewActivityParams
from fieldtrack.models.driver import Driver, DriverUpdate, NewDriverParams
from fieldtrack.models.vehicle import NewVehicleParams, Vehicle
from fieldtrack.store import Store

_logger = logging.getLogger(__name__)

TRecord = TypeVar("TRecord", Driver, Vehicle, Activity)


class Repository:
    """Entity repository backed by a :class:`~fieldtrack.store.Store`.

    Drivers and vehicles can be created and edited but not deleted.
    References between records are never checked on write.
    """

    def __init__(self, store: Store, keys: CollectionKeys | None = None) -> None:
        self._store = store
        self._keys = keys or CollectionKeys()

    @property
    def keys(self) -> CollectionKeys:
        return self._keys

    # ------------------------------------------------------------------
    # Raw collections
    # ------------------------------------------------------------------

    def driver_records(self) -> list[dict[str, Any]]:
        return self._store.load(self._keys.drivers)

    def vehicle_records(self) -> list[dict[str, Any]]:
        return self._store.load(self._keys.vehicles)

    def activity_records(self) -> list[dict[str, Any]]:
        return self._store.load(self._keys.activities)

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def drivers(self) -> list[Driver]:
        return [Driver.model_validate(record) for record in self.driver_records()]

    def vehicles(self) -> list[Vehicle]:
        return [Vehicle.model_validate(record) for record in self.vehicle_records()]

    def activities(self) -> list[Activity]:
        return [Activity.model_validate(record) for record in self.activity_records()]

    def get_driver(self, driver_id: str) -> Driver | None:
        return self._find(self._keys.drivers, driver_id, Driver)

    def get_vehicle(self, vehicle_id: str) -> Vehicle | None:
        return self._find(self._keys.vehicles, vehicle_id, Vehicle)

    def get_activity(self, activity_id: str) -> Activity | None:
        return self._find(self._keys.activities, activity_id, Activity)

    # ------------------------------------------------------------------
    # Drivers
    # ------------------------------------------------------------------

    def add_driver(self, name: str, assigned_vehicle_id: str = "") -> Driver:
        """Create a driver with a trimmed, non-empty *name*.

        Raises
        ------
        FieldTrackValidationError
            When *name* is empty after trimming.
        """
        params = NewDriverParams.parse(name=name, assigned_vehicle_id=assigned_vehicle_id)
        record = {"id": new_id(DRIVER_ID_PREFIX), **params.model_dump(by_alias=True)}
        return self._append(self._keys.drivers, record, Driver)

    def update_driver(self, driver_id: str, **fields: Any) -> Driver | None:
        """Merge *fields* onto a driver; ``None`` when *driver_id* is unknown.

        Fields may be given as ``name=...`` / ``assigned_vehicle_id=...`` or
        by their stored names. The id itself can not be changed.
        """
        patch = DriverUpdate.parse(**fields).to_record_patch()
        return self._update(self._keys.drivers, driver_id, patch, Driver)

    # ------------------------------------------------------------------
    # Vehicles
    # ------------------------------------------------------------------

    def add_vehicle(self, label: str) -> Vehicle:
        params = NewVehicleParams.parse(label=label)
        record = {"id": new_id(VEHICLE_ID_PREFIX), **params.model_dump(by_alias=True)}
        return self._append(self._keys.vehicles, record, Vehicle)

    # ------------------------------------------------------------------
    # Activities
    # ------------------------------------------------------------------

    def add_activity(
        self,
        driver_id: str,
        vehicle_id: str,
        date: str,
        location: str = "",
        revenue: float | str | None = 0.0,
    ) -> Activity:
        """Record a new activity.

        Use this rather than :meth:`update_activity` when the driver,
        vehicle or location of a trip changes, so earlier records keep
        describing what actually happened.

        Raises
        ------
        FieldTrackValidationError
            When a reference or the date is missing, the date is not
            ``YYYY-MM-DD``, or revenue is negative or not a number.
        """
        params = NewActivityParams.parse(
            driver_id=driver_id,
            vehicle_id=vehicle_id,
            location=location,
            date=date,
            revenue=revenue,
        )
        record = {"id": new_id(ACTIVITY_ID_PREFIX), **params.model_dump(by_alias=True)}
        return self._append(self._keys.activities, record, Activity)

    def update_activity(self, activity_id: str, **fields: Any) -> Activity | None:
        """Replace the supplied fields of an activity; ``None`` when unknown."""
        patch = ActivityUpdate.parse(**fields).to_record_patch()
        return self._update(self._keys.activities, activity_id, patch, Activity)

    def delete_activity(self, activity_id: str) -> None:
        """Remove an activity. Unknown ids are ignored."""
        records = self._store.load(self._keys.activities)
        kept = [record for record in records if record.get("id") != activity_id]
        if len(kept) == len(records):
            _logger.debug("delete_activity: %s not found", activity_id)
            return
        self._store.save(self._keys.activities, kept)

    # Route-named variants kept for callers written against the old schema.

    def add_route(self, route: Mapping[str, Any]) -> Activity:
        """Create an activity from a legacy ``routeName``/``cost`` route dict."""
        return self.add_activity(**route_to_activity_fields(route))

    def update_route(self, route_id: str, fields: Mapping[str, Any]) -> Activity | None:
        return self.update_activity(route_id, **route_patch_to_activity_fields(fields))

    def delete_route(self, route_id: str) -> None:
        self.delete_activity(route_id)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _find(self, key: str, record_id: str, model: type[TRecord]) -> TRecord | None:
        for record in self._store.load(key):
            if record.get("id") == record_id:
                return model.model_validate(record)
        return None

    def _append(self, key: str, record: dict[str, Any], model: type[TRecord]) -> TRecord:
        records = self._store.load(key)
        records.append(record)
        self._store.save(key, records)
        _logger.debug("Added %s to %s", record["id"], key)
        return model.model_validate(record)

    def _update(self, key: str, record_id: str, patch: dict[str, Any], model: type[TRecord]) -> TRecord | None:
        records = self._store.load(key)
        for index, record in enumerate(records):
            if record.get("id") != record_id:
                continue
            merged = {**record, **patch}
            records[index] = merged
            self._store.save(key, records)
            return model.model_validate(merged)
        _logger.debug("Update skipped: %s not found in %s", record_id, key)
        return None
