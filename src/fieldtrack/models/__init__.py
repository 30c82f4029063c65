"""Record and report models for fieldtrack."""

from fieldtrack.models._base import RecordModel, RecordParams
from fieldtrack.models.activity import Activity, ActivityUpdate, NewActivityParams
from fieldtrack.models.driver import Driver, DriverUpdate, NewDriverParams
from fieldtrack.models.reports import (
    ActivityRow,
    DashboardStats,
    DriverOverview,
    DriverTotals,
    PeriodSummaries,
    Summary,
    VehicleOverview,
    VehicleTotals,
)
from fieldtrack.models.snapshot import ExportDocument, ImportResult
from fieldtrack.models.vehicle import NewVehicleParams, Vehicle

__all__ = [
    "Activity",
    "ActivityRow",
    "ActivityUpdate",
    "DashboardStats",
    "Driver",
    "DriverOverview",
    "DriverTotals",
    "DriverUpdate",
    "ExportDocument",
    "ImportResult",
    "NewActivityParams",
    "NewDriverParams",
    "NewVehicleParams",
    "PeriodSummaries",
    "RecordModel",
    "RecordParams",
    "Summary",
    "Vehicle",
    "VehicleOverview",
    "VehicleTotals",
]
