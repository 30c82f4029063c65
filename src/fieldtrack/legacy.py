"""Translation of records written under the pre-version-2 "route" schema.

Before activities existed the product stored *routes* with a ``routeName``
and a ``cost``. Version 2 renamed them to ``location`` and ``revenue``.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from fieldtrack._constants import LEGACY_FIELD_RENAMES


def translate_route(record: Mapping[str, Any]) -> dict[str, Any]:
    """Return *record* with legacy keys renamed to their version 2 names.

    A legacy key is only renamed when the record does not already carry the
    new key; all other keys are kept as they are.
    """
    working = dict(record)
    for old_key, new_key in LEGACY_FIELD_RENAMES.items():
        if old_key in working and new_key not in working:
            working[new_key] = working.pop(old_key)
    return working


def is_legacy_route(record: Mapping[str, Any]) -> bool:
    return any(old_key in record and new_key not in record for old_key, new_key in LEGACY_FIELD_RENAMES.items())


def route_to_activity_fields(route: Mapping[str, Any]) -> dict[str, Any]:
    """Build new-activity keyword arguments from a legacy route dict."""
    return {
        "driver_id": route.get("driverId"),
        "vehicle_id": route.get("vehicleId"),
        "location": route.get("routeName") or "",
        "date": route.get("date"),
        "revenue": route.get("cost") or 0,
    }


def route_patch_to_activity_fields(fields: Mapping[str, Any]) -> dict[str, Any]:
    """Build activity update keyword arguments from a legacy route patch.

    Empty driver, vehicle, name and date values mean "unchanged"; ``cost``
    is applied whenever it is present.
    """
    converted: dict[str, Any] = {}
    if fields.get("driverId"):
        converted["driver_id"] = fields["driverId"]
    if fields.get("vehicleId"):
        converted["vehicle_id"] = fields["vehicleId"]
    if fields.get("routeName"):
        converted["location"] = fields["routeName"]
    if fields.get("date"):
        converted["date"] = fields["date"]
    if "cost" in fields and fields["cost"] is not None:
        converted["revenue"] = fields["cost"]
    return converted
