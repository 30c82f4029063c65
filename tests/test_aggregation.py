from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

import pytest

from fieldtrack.config import FieldTrackConfig
from fieldtrack.exceptions import FieldTrackValidationError
from fieldtrack.store import MemoryBackend
from fieldtrack.tracker import FieldTracker


def _tracker(activities: list[dict[str, Any]], now: datetime, **config: Any) -> FieldTracker:
    tracker = FieldTracker(FieldTrackConfig(**config), backend=MemoryBackend(), clock=lambda: now)
    tracker.store.save("fleet_activities", activities)
    return tracker


def _activity(activity_id: str, date: str, revenue: Any = 10, **extra: Any) -> dict[str, Any]:
    return {"id": activity_id, "driverId": "drv-1", "vehicleId": "veh-1", "date": date, "revenue": revenue, **extra}


def test_overall_totals_scenario(seeded: FieldTracker) -> None:
    totals = seeded.aggregation.overall_totals()
    assert totals.count == 2
    assert totals.total_revenue == 350


def test_by_driver_totals_scenario(seeded: FieldTracker) -> None:
    rows = seeded.aggregation.by_driver_totals()
    assert [row.model_dump(by_alias=True) for row in rows] == [
        {"driverId": "drv-1", "name": "Ama", "count": 2, "totalRevenue": 350.0}
    ]


def test_by_vehicle_totals_scenario(seeded: FieldTracker) -> None:
    rows = seeded.aggregation.by_vehicle_totals()
    assert [row.model_dump(by_alias=True) for row in rows] == [
        {"vehicleId": "veh-1", "label": "GT-1234", "count": 2, "totalRevenue": 350.0}
    ]


def test_summarize_with_predicate(seeded: FieldTracker) -> None:
    summary = seeded.aggregation.summarize(lambda activity: activity.location == "Accra")
    assert summary.count == 1
    assert summary.total_revenue == 150


def test_malformed_revenue_counts_as_zero(now: datetime) -> None:
    tracker = _tracker(
        [
            _activity("a", "2026-01-12", "abc"),
            _activity("b", "2026-01-12", None),
            _activity("c", "2026-01-12", -40),
            _activity("d", "2026-01-12", "12.5"),
            {"id": "e"},
        ],
        now,
    )
    totals = tracker.aggregation.overall_totals()
    assert totals.count == 5
    assert totals.total_revenue == 12.5


def test_stored_raw_key_does_not_break_reads(now: datetime) -> None:
    tracker = _tracker(
        [
            {"id": "a", "date": "2026-01-12", "revenue": 5, "raw": "legacy"},
            {"id": "b", "date": "2026-01-12", "revenue": 7, "raw": {"id": "other", "revenue": 99}},
        ],
        now,
    )

    totals = tracker.aggregation.overall_totals()

    assert totals.count == 2
    assert totals.total_revenue == 12
    assert [a.raw["id"] for a in tracker.repository.activities()] == ["a", "b"]


class TestPeriodSummaries:
    def test_daily_matches_today_exactly(self, seeded: FieldTracker) -> None:
        daily = seeded.aggregation.daily_summary()
        assert daily.count == 1
        assert daily.total_revenue == 200

    def test_weekly_and_monthly_windows(self, now: datetime) -> None:
        tracker = _tracker(
            [
                _activity("today", "2026-01-12"),
                _activity("six-days", "2026-01-06"),
                _activity("three-weeks", "2025-12-22"),
                _activity("old", "2025-11-30"),
                _activity("bad-date", "12/01/2026"),
                _activity("no-date", ""),
            ],
            now,
        )
        assert tracker.aggregation.weekly_summary().count == 2
        assert tracker.aggregation.monthly_summary().count == 3

    def test_window_edge_is_inclusive(self) -> None:
        midnight = datetime(2026, 1, 12, tzinfo=UTC)
        tracker = _tracker([_activity("edge", "2026-01-05")], midnight)
        assert tracker.aggregation.weekly_summary().count == 1

        later = datetime(2026, 1, 12, 10, 0, tzinfo=UTC)
        tracker = _tracker([_activity("edge", "2026-01-05")], later)
        assert tracker.aggregation.weekly_summary().count == 0

    def test_future_dated_included_by_default(self, now: datetime) -> None:
        tracker = _tracker([_activity("future", "2026-03-01")], now)
        assert tracker.aggregation.weekly_summary().count == 1
        assert tracker.aggregation.monthly_summary().count == 1
        assert tracker.aggregation.daily_summary().count == 0

    def test_future_dated_can_be_excluded(self, now: datetime) -> None:
        tracker = _tracker([_activity("future", "2026-03-01")], now, include_future_dated=False)
        assert tracker.aggregation.weekly_summary().count == 0
        assert tracker.aggregation.monthly_summary().count == 0

    def test_configured_window_sizes(self, now: datetime) -> None:
        tracker = _tracker([_activity("ten-days", "2026-01-02")], now, week_days=14, month_days=5)
        assert tracker.aggregation.weekly_summary().count == 1
        assert tracker.aggregation.monthly_summary().count == 0

    def test_period_summaries_match_individual_calls(self, seeded: FieldTracker) -> None:
        periods = seeded.aggregation.period_summaries()
        assert periods.daily == seeded.aggregation.daily_summary()
        assert periods.weekly == seeded.aggregation.weekly_summary()
        assert periods.monthly == seeded.aggregation.monthly_summary()

    def test_today_follows_the_clock(self) -> None:
        tracker = _tracker([_activity("a", "2026-01-11")], datetime(2026, 1, 11, 23, 59, tzinfo=UTC))
        assert tracker.aggregation.daily_summary().count == 1


class TestCustomRange:
    def test_summary(self, seeded: FieldTracker) -> None:
        summary = seeded.aggregation.custom_range_summary("2026-01-11", "2026-01-31")
        assert summary.count == 1
        assert summary.total_revenue == 200

    def test_single_day(self, seeded: FieldTracker) -> None:
        assert seeded.aggregation.custom_range_summary("2026-01-10", "2026-01-10").count == 1

    def test_inverted_range_rejected(self, seeded: FieldTracker) -> None:
        with pytest.raises(FieldTrackValidationError) as excinfo:
            seeded.aggregation.custom_range_summary("2026-01-12", "2026-01-10")
        assert excinfo.value.field == "end_date"

    @pytest.mark.parametrize(("start", "end"), [("", "2026-01-10"), ("2026-01-10", "")])
    def test_missing_bound_rejected(self, seeded: FieldTracker, start: str, end: str) -> None:
        with pytest.raises(FieldTrackValidationError):
            seeded.aggregation.custom_range_summary(start, end)


class TestEntityTotals:
    def test_driver_ordering(self, tracker: FieldTracker) -> None:
        tracker.store.save(
            "fleet_drivers",
            [
                {"id": "drv-c", "name": "Cy"},
                {"id": "drv-b", "name": "Bob"},
                {"id": "drv-z", "name": "Zed"},
                {"id": "drv-a", "name": "Ama"},
            ],
        )
        tracker.store.save(
            "fleet_activities",
            [
                {"id": "1", "driverId": "drv-z", "revenue": 5},
                {"id": "2", "driverId": "drv-z", "revenue": 5},
                {"id": "3", "driverId": "drv-b", "revenue": 7},
                {"id": "4", "driverId": "drv-a", "revenue": 1},
                {"id": "5", "driverId": "drv-ghost", "revenue": 100},
            ],
        )

        rows = tracker.aggregation.by_driver_totals()

        assert [(r.name, r.count, r.total_revenue) for r in rows] == [
            ("Zed", 2, 10.0),
            ("Ama", 1, 1.0),
            ("Bob", 1, 7.0),
            ("Cy", 0, 0.0),
        ]
        counts = [r.count for r in rows]
        assert counts == sorted(counts, reverse=True)

    def test_vehicle_ordering(self, tracker: FieldTracker) -> None:
        tracker.store.save("fleet_vehicles", [{"id": "veh-2", "label": "B-2"}, {"id": "veh-1", "label": "A-1"}])
        tracker.store.save("fleet_activities", [{"id": "1", "vehicleId": "veh-2", "revenue": 3}])

        rows = tracker.aggregation.by_vehicle_totals()

        assert [(r.label, r.count) for r in rows] == [("B-2", 1), ("A-1", 0)]

    def test_no_drivers(self, tracker: FieldTracker) -> None:
        assert tracker.aggregation.by_driver_totals() == []


def test_dashboard(seeded: FieldTracker) -> None:
    stats = seeded.aggregation.dashboard()
    assert stats.driver_count == 1
    assert stats.vehicle_count == 1
    assert stats.today.count == 1
    assert stats.today.total_revenue == 200
    assert stats.total_revenue == 350
