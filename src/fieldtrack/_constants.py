"""Internal constants shared across the library."""

DRIVERS_KEY = "fleet_drivers"
VEHICLES_KEY = "fleet_vehicles"
ACTIVITIES_KEY = "fleet_activities"

DRIVER_ID_PREFIX = "drv"
VEHICLE_ID_PREFIX = "veh"
ACTIVITY_ID_PREFIX = "act"

# ------------------------------------------------------------------
# Export document
# ------------------------------------------------------------------

EXPORT_VERSION = 2
EXPORT_FILENAME = "fleet-data-export.json"

# Activities were called "routes" before the version 2 schema.
LEGACY_ACTIVITIES_FIELD = "routes"
LEGACY_FIELD_RENAMES: dict[str, str] = {
    "routeName": "location",
    "cost": "revenue",
}

# ------------------------------------------------------------------
# Reporting
# ------------------------------------------------------------------

WEEK_DAYS = 7
MONTH_DAYS = 30

UNASSIGNED_LABEL = "Unassigned"
MISSING_REFERENCE = "—"
