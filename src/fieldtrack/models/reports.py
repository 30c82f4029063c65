"""Derived, read-only report models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ReportModel(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )


class Summary(ReportModel):
    """Activity count and revenue total over some selection."""

    count: int = 0
    total_revenue: float = 0.0


class PeriodSummaries(ReportModel):
    """Daily, weekly and monthly summaries relative to one instant."""

    daily: Summary
    weekly: Summary
    monthly: Summary


class DriverTotals(ReportModel):
    driver_id: str
    name: str
    count: int = 0
    total_revenue: float = 0.0


class VehicleTotals(ReportModel):
    vehicle_id: str
    label: str
    count: int = 0
    total_revenue: float = 0.0


class DashboardStats(ReportModel):
    driver_count: int = 0
    vehicle_count: int = 0
    today: Summary = Summary()
    total_revenue: float = 0.0


class LastActivity(ReportModel):
    """Most recent activity facts shown next to a driver or vehicle."""

    last_date: str | None = None
    last_revenue: float = 0.0
    last_location: str | None = None


class DriverOverview(LastActivity):
    driver_id: str
    name: str
    assigned_vehicle_id: str = ""
    assigned_vehicle_label: str
    """Label of the assigned vehicle, or ``"Unassigned"`` when the reference is empty or dangling."""


class VehicleOverview(LastActivity):
    vehicle_id: str
    label: str


class ActivityRow(ReportModel):
    """An activity joined with the display names of its references.

    Dangling driver or vehicle ids resolve to a placeholder, never an error.
    """

    activity_id: str
    driver_id: str
    driver_name: str
    vehicle_id: str
    vehicle_label: str
    location: str
    date: str
    revenue: float
