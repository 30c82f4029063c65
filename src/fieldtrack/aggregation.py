"""Count and revenue summaries over the activity collection.

Time windows are measured against an injected clock rather than ambient
time, so reports are reproducible for a fixed reference instant.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from datetime import UTC, datetime

from fieldtrack._constants import MONTH_DAYS, WEEK_DAYS
from fieldtrack.exceptions import FieldTrackValidationError
from fieldtrack.models.activity import Activity
from fieldtrack.models.reports import (
    DashboardStats,
    DriverTotals,
    PeriodSummaries,
    Summary,
    VehicleTotals,
)
from fieldtrack.normalize import days_since, iso_date
from fieldtrack.query import QueryEngine
from fieldtrack.repository import Repository

ActivityPredicate = Callable[[Activity], bool]


def _utcnow() -> datetime:
    return datetime.now(UTC)


def summarize_activities(activities: Iterable[Activity], predicate: ActivityPredicate | None = None) -> Summary:
    """Single pass count and revenue sum over the matching activities."""
    count = 0
    total = 0.0
    for activity in activities:
        if predicate is not None and not predicate(activity):
            continue
        count += 1
        total += activity.revenue
    return Summary(count=count, total_revenue=total)


class AggregationEngine:
    """Derived summaries by period, driver and vehicle.

    Parameters
    ----------
    repository : Repository
        Source of drivers, vehicles and activities.
    query : QueryEngine
        Used for the custom date range.
    clock : callable
        Returns the reference instant for "today" and the day windows.
    week_days, month_days : int
        Window sizes of the weekly and monthly summaries.
    include_future_dated : bool
        Whether activities dated after the reference instant fall inside the
        weekly and monthly windows.
    """

    def __init__(
        self,
        repository: Repository,
        query: QueryEngine,
        *,
        clock: Callable[[], datetime] = _utcnow,
        week_days: int = WEEK_DAYS,
        month_days: int = MONTH_DAYS,
        include_future_dated: bool = True,
    ) -> None:
        self._repository = repository
        self._query = query
        self._clock = clock
        self._week_days = week_days
        self._month_days = month_days
        self._include_future_dated = include_future_dated

    # ------------------------------------------------------------------
    # Predicates
    # ------------------------------------------------------------------

    def on_day(self, day: str) -> ActivityPredicate:
        return lambda activity: activity.date == day

    def within_days(self, days: int, now: datetime) -> ActivityPredicate:
        """Activities dated no more than *days* days before *now*.

        Malformed dates never match.
        """

        def predicate(activity: Activity) -> bool:
            elapsed = days_since(activity.date, now)
            if elapsed is None:
                return False
            if elapsed < 0 and not self._include_future_dated:
                return False
            return elapsed <= days

        return predicate

    # ------------------------------------------------------------------
    # Summaries
    # ------------------------------------------------------------------

    def summarize(self, predicate: ActivityPredicate | None = None) -> Summary:
        """Count and total revenue of the activities matching *predicate*."""
        return summarize_activities(self._repository.activities(), predicate)

    def daily_summary(self) -> Summary:
        return self.summarize(self.on_day(iso_date(self._clock())))

    def weekly_summary(self) -> Summary:
        return self.summarize(self.within_days(self._week_days, self._clock()))

    def monthly_summary(self) -> Summary:
        return self.summarize(self.within_days(self._month_days, self._clock()))

    def period_summaries(self) -> PeriodSummaries:
        """Daily, weekly and monthly summaries from one snapshot and one instant."""
        now = self._clock()
        activities = self._repository.activities()
        return PeriodSummaries(
            daily=summarize_activities(activities, self.on_day(iso_date(now))),
            weekly=summarize_activities(activities, self.within_days(self._week_days, now)),
            monthly=summarize_activities(activities, self.within_days(self._month_days, now)),
        )

    def custom_range_summary(self, start_date: str, end_date: str) -> Summary:
        """Summary of the activities dated within ``[start_date, end_date]``.

        Raises
        ------
        FieldTrackValidationError
            When a bound is missing or *start_date* sorts after *end_date*.
        """
        if not start_date:
            raise FieldTrackValidationError("start date is required", field="start_date")
        if not end_date:
            raise FieldTrackValidationError("end date is required", field="end_date")
        if start_date > end_date:
            raise FieldTrackValidationError(
                f"end date {end_date} must not be before start date {start_date}",
                field="end_date",
            )
        return summarize_activities(self._query.by_period(start_date, end_date))

    def overall_totals(self) -> Summary:
        return self.summarize()

    # ------------------------------------------------------------------
    # Per-entity totals
    # ------------------------------------------------------------------

    def by_driver_totals(self) -> list[DriverTotals]:
        """One row per known driver, most active first, then by name."""
        counts, revenue = self._tally(self._repository.activities(), "driver_id")
        rows = [
            DriverTotals(
                driver_id=driver.id,
                name=driver.name,
                count=counts.get(driver.id, 0),
                total_revenue=revenue.get(driver.id, 0.0),
            )
            for driver in self._repository.drivers()
        ]
        rows.sort(key=lambda row: (-row.count, row.name))
        return rows

    def by_vehicle_totals(self) -> list[VehicleTotals]:
        """One row per known vehicle, most active first, then by label."""
        counts, revenue = self._tally(self._repository.activities(), "vehicle_id")
        rows = [
            VehicleTotals(
                vehicle_id=vehicle.id,
                label=vehicle.label,
                count=counts.get(vehicle.id, 0),
                total_revenue=revenue.get(vehicle.id, 0.0),
            )
            for vehicle in self._repository.vehicles()
        ]
        rows.sort(key=lambda row: (-row.count, row.label))
        return rows

    def dashboard(self) -> DashboardStats:
        """Headline figures: entity counts, today's activity and overall revenue."""
        activities = self._repository.activities()
        return DashboardStats(
            driver_count=len(self._repository.driver_records()),
            vehicle_count=len(self._repository.vehicle_records()),
            today=summarize_activities(activities, self.on_day(iso_date(self._clock()))),
            total_revenue=summarize_activities(activities).total_revenue,
        )

    @staticmethod
    def _tally(activities: Iterable[Activity], attribute: str) -> tuple[dict[str, int], dict[str, float]]:
        counts: dict[str, int] = {}
        revenue: dict[str, float] = {}
        for activity in activities:
            ref = getattr(activity, attribute)
            counts[ref] = counts.get(ref, 0) + 1
            revenue[ref] = revenue.get(ref, 0.0) + activity.revenue
        return counts, revenue
