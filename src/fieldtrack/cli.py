"""Command-line front end for a local fieldtrack store.

Usage
-----
::

    fieldtrack add-driver "Ama"
    fieldtrack add-vehicle GT-1234
    fieldtrack add-activity DRIVER_ID VEHICLE_ID 2026-01-10 --location Accra --revenue 150
    fieldtrack summary [--json]
    fieldtrack drivers | vehicles | activities [--driver ID] [--vehicle ID]
    fieldtrack range 2026-01-01 2026-01-31
    fieldtrack export [--output PATH]
    fieldtrack import FILE [--translate-legacy]

The store location comes from ``FIELDTRACK_DATA_DIR`` unless ``--data-dir``
is given.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from pydantic import BaseModel

from fieldtrack.config import FieldTrackConfig
from fieldtrack.exceptions import FieldTrackError, FieldTrackValidationError, InvalidDocumentError
from fieldtrack.models.reports import Summary
from fieldtrack.tracker import FieldTracker

_logger = logging.getLogger(__name__)


def _money(amount: float, currency: str) -> str:
    return f"{currency} {amount:.2f}"


def _to_json(value: BaseModel | Sequence[BaseModel]) -> str:
    if isinstance(value, BaseModel):
        payload: Any = value.model_dump(by_alias=True)
    else:
        payload = [item.model_dump(by_alias=True) for item in value]
    return json.dumps(payload, indent=2, ensure_ascii=False)


def _summary_line(title: str, summary: Summary, currency: str) -> str:
    return f"  {title:<10}: {summary.count:>5} activities  {_money(summary.total_revenue, currency)}"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="fieldtrack", description="Record and report field activities.")
    parser.add_argument("--data-dir", type=Path, help="Store directory (default: FIELDTRACK_DATA_DIR or ~/.fieldtrack)")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    add_driver = sub.add_parser("add-driver", help="Create a driver")
    add_driver.add_argument("name")
    add_driver.add_argument("--vehicle", default="", help="Assigned vehicle id")

    add_vehicle = sub.add_parser("add-vehicle", help="Create a vehicle")
    add_vehicle.add_argument("label")

    add_activity = sub.add_parser("add-activity", help="Record an activity")
    add_activity.add_argument("driver_id")
    add_activity.add_argument("vehicle_id")
    add_activity.add_argument("date", help="YYYY-MM-DD")
    add_activity.add_argument("--location", default="")
    add_activity.add_argument("--revenue", default="0")

    summary = sub.add_parser("summary", help="Daily, weekly, monthly and overall totals")
    summary.add_argument("--json", action="store_true", dest="json_mode", help="Output machine-readable JSON")

    for name, help_text in (("drivers", "Totals per driver"), ("vehicles", "Totals per vehicle")):
        totals = sub.add_parser(name, help=help_text)
        totals.add_argument("--json", action="store_true", dest="json_mode", help="Output machine-readable JSON")

    activities = sub.add_parser("activities", help="List activities")
    activities.add_argument("--driver", default=None, help="Only this driver id")
    activities.add_argument("--vehicle", default=None, help="Only this vehicle id")
    activities.add_argument("--json", action="store_true", dest="json_mode", help="Output machine-readable JSON")

    period = sub.add_parser("range", help="Totals for an inclusive date range")
    period.add_argument("start_date")
    period.add_argument("end_date")
    period.add_argument("--json", action="store_true", dest="json_mode", help="Output machine-readable JSON")

    export = sub.add_parser("export", help="Write a JSON backup of all data")
    export.add_argument("--output", "-o", type=Path, default=Path.cwd(), help="File or directory (default: cwd)")

    load = sub.add_parser("import", help="Replace all data with a JSON backup")
    load.add_argument("file", type=Path)
    load.add_argument(
        "--translate-legacy",
        action="store_true",
        help="Rename routeName/cost to location/revenue in legacy route backups",
    )
    return parser


def _run(tracker: FieldTracker, args: argparse.Namespace) -> None:
    currency = tracker.config.currency
    repository = tracker.repository
    aggregation = tracker.aggregation

    if args.command == "add-driver":
        print(repository.add_driver(args.name, args.vehicle).id)
    elif args.command == "add-vehicle":
        print(repository.add_vehicle(args.label).id)
    elif args.command == "add-activity":
        activity = repository.add_activity(
            args.driver_id,
            args.vehicle_id,
            args.date,
            location=args.location,
            revenue=args.revenue,
        )
        print(activity.id)
    elif args.command == "summary":
        periods = aggregation.period_summaries()
        overall = aggregation.overall_totals()
        if args.json_mode:
            payload = periods.model_dump(by_alias=True)
            payload["overall"] = overall.model_dump(by_alias=True)
            print(json.dumps(payload, indent=2))
            return
        print(_summary_line("today", periods.daily, currency))
        print(_summary_line("week", periods.weekly, currency))
        print(_summary_line("month", periods.monthly, currency))
        print(_summary_line("overall", overall, currency))
    elif args.command == "drivers":
        driver_rows = aggregation.by_driver_totals()
        if args.json_mode:
            print(_to_json(driver_rows))
            return
        if not driver_rows:
            print("No drivers yet.")
        for row in driver_rows:
            print(f"  {row.driver_id}  {row.name:<24} {row.count:>5}  {_money(row.total_revenue, currency)}")
    elif args.command == "vehicles":
        vehicle_rows = aggregation.by_vehicle_totals()
        if args.json_mode:
            print(_to_json(vehicle_rows))
            return
        if not vehicle_rows:
            print("No vehicles yet.")
        for row in vehicle_rows:
            print(f"  {row.vehicle_id}  {row.label:<24} {row.count:>5}  {_money(row.total_revenue, currency)}")
    elif args.command == "activities":
        rows = tracker.query.activity_rows(driver_id=args.driver, vehicle_id=args.vehicle)
        if args.json_mode:
            print(_to_json(rows))
            return
        if not rows:
            print("No activities recorded yet.")
        for activity_row in rows:
            print(
                f"  {activity_row.date}  {activity_row.driver_name:<20} {activity_row.vehicle_label:<12} "
                f"{activity_row.location:<20} {_money(activity_row.revenue, currency)}"
            )
    elif args.command == "range":
        result = aggregation.custom_range_summary(args.start_date, args.end_date)
        if args.json_mode:
            print(_to_json(result))
            return
        print(_summary_line(f"{args.start_date} to {args.end_date}", result, currency))
    elif args.command == "export":
        path = tracker.transfer.write_export(args.output)
        print(f"Exported to {path}")
    elif args.command == "import":
        imported = asyncio.run(tracker.transfer.import_file(args.file, translate_legacy=args.translate_legacy))
        print(
            f"Imported {len(imported.drivers)} drivers, {len(imported.vehicles)} vehicles, "
            f"{len(imported.activities)} activities"
        )


def main(argv: Sequence[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    else:
        logging.basicConfig(level=logging.WARNING)

    overrides: dict[str, Any] = {}
    if args.data_dir is not None:
        overrides["data_dir"] = args.data_dir

    try:
        tracker = FieldTracker(FieldTrackConfig.from_env(**overrides))
        _run(tracker, args)
    except (FieldTrackValidationError, InvalidDocumentError, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    except FieldTrackError as exc:
        _logger.debug("Command failed", exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
