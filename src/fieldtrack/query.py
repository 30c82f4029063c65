"""Read-only activity queries.

Each query loads a fresh snapshot from the store; nothing is cached between
calls. Date bounds are inclusive and compared as ``YYYY-MM-DD`` strings,
which order the same way the calendar does.
"""

from __future__ import annotations

from collections.abc import Iterable
from operator import attrgetter

from fieldtrack._constants import MISSING_REFERENCE, UNASSIGNED_LABEL
from fieldtrack.models.activity import Activity
from fieldtrack.models.reports import ActivityRow, DriverOverview, VehicleOverview
from fieldtrack.repository import Repository


def in_range(value: str, start_date: str | None = None, end_date: str | None = None) -> bool:
    """Whether *value* lies in the closed interval ``[start_date, end_date]``.

    A missing or empty bound leaves that side open.
    """
    if start_date and value < start_date:
        return False
    return not (end_date and value > end_date)


def latest(activities: Iterable[Activity]) -> Activity | None:
    """Activity with the greatest date; the first one seen wins ties."""
    activities = list(activities)
    if not activities:
        return None
    return max(activities, key=attrgetter("date"))


class QueryEngine:
    """Filters over the activity collection."""

    def __init__(self, repository: Repository) -> None:
        self._repository = repository

    def by_driver(
        self,
        driver_id: str,
        start_date: str | None = None,
        end_date: str | None = None,
    ) -> list[Activity]:
        return [
            activity
            for activity in self._repository.activities()
            if activity.driver_id == driver_id and in_range(activity.date, start_date, end_date)
        ]

    def by_vehicle(
        self,
        vehicle_id: str,
        start_date: str | None = None,
        end_date: str | None = None,
    ) -> list[Activity]:
        return [
            activity
            for activity in self._repository.activities()
            if activity.vehicle_id == vehicle_id and in_range(activity.date, start_date, end_date)
        ]

    def by_period(self, start_date: str, end_date: str) -> list[Activity]:
        return [
            activity
            for activity in self._repository.activities()
            if start_date <= activity.date <= end_date
        ]

    def last_by_driver(self, driver_id: str) -> Activity | None:
        return latest(self.by_driver(driver_id))

    def last_by_vehicle(self, vehicle_id: str) -> Activity | None:
        return latest(self.by_vehicle(vehicle_id))

    def driver_overview(self, driver_id: str) -> DriverOverview | None:
        """Driver details with their assigned vehicle and last activity."""
        driver = self._repository.get_driver(driver_id)
        if driver is None:
            return None

        vehicle_label = ""
        if driver.assigned_vehicle_id:
            vehicle = self._repository.get_vehicle(driver.assigned_vehicle_id)
            vehicle_label = vehicle.label if vehicle is not None else ""

        last = self.last_by_driver(driver_id)
        return DriverOverview(
            driver_id=driver.id,
            name=driver.name,
            assigned_vehicle_id=driver.assigned_vehicle_id,
            assigned_vehicle_label=vehicle_label or UNASSIGNED_LABEL,
            last_date=(last.date or None) if last else None,
            last_revenue=last.revenue if last else 0.0,
            last_location=(last.location or None) if last else None,
        )

    def vehicle_overview(self, vehicle_id: str) -> VehicleOverview | None:
        vehicle = self._repository.get_vehicle(vehicle_id)
        if vehicle is None:
            return None

        last = self.last_by_vehicle(vehicle_id)
        return VehicleOverview(
            vehicle_id=vehicle.id,
            label=vehicle.label,
            last_date=(last.date or None) if last else None,
            last_revenue=last.revenue if last else 0.0,
            last_location=(last.location or None) if last else None,
        )

    def activity_rows(self, driver_id: str | None = None, vehicle_id: str | None = None) -> list[ActivityRow]:
        """Activities joined with driver names and vehicle labels.

        *driver_id* / *vehicle_id* narrow the rows when given.
        """
        names = {driver.id: driver.name for driver in self._repository.drivers()}
        labels = {vehicle.id: vehicle.label for vehicle in self._repository.vehicles()}

        rows: list[ActivityRow] = []
        for activity in self._repository.activities():
            if driver_id and activity.driver_id != driver_id:
                continue
            if vehicle_id and activity.vehicle_id != vehicle_id:
                continue
            rows.append(
                ActivityRow(
                    activity_id=activity.id,
                    driver_id=activity.driver_id,
                    driver_name=names.get(activity.driver_id) or MISSING_REFERENCE,
                    vehicle_id=activity.vehicle_id,
                    vehicle_label=labels.get(activity.vehicle_id) or MISSING_REFERENCE,
                    location=activity.location or MISSING_REFERENCE,
                    date=activity.date,
                    revenue=activity.revenue,
                )
            )
        return rows
