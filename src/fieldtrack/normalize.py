"""Normalization helpers.

Centralizes defensive parsing of stored values. Records may come from an
older schema or a hand-edited import, so nothing here raises on bad input.
"""

from __future__ import annotations

import math
from datetime import UTC, date, datetime
from typing import Any


def safe_float(value: Any) -> float | None:
    if value is None or value == "" or isinstance(value, bool):
        return None
    try:
        result = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(result) or math.isinf(result):
        return None
    return result


def safe_str(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


def non_negative_or_zero(value: Any) -> float:
    """Coerce a revenue-like value to a non-negative float.

    Missing, non-numeric and negative values all become ``0.0``.
    """
    parsed = safe_float(value)
    if parsed is None or parsed < 0:
        return 0.0
    return parsed


def parse_iso_date(value: Any) -> date | None:
    """Parse a fixed-width ``YYYY-MM-DD`` string, ``None`` when malformed."""
    if not isinstance(value, str) or len(value) != 10:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        return None


def iso_date(moment: datetime) -> str:
    """Return the UTC calendar date of *moment* as ``YYYY-MM-DD``."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=UTC)
    return moment.astimezone(UTC).date().isoformat()


def days_since(value: Any, now: datetime) -> float | None:
    """Fractional days between UTC midnight of *value* and *now*.

    Negative for dates after *now*; ``None`` when *value* is not an ISO date.
    """
    parsed = parse_iso_date(value)
    if parsed is None:
        return None
    if now.tzinfo is None:
        now = now.replace(tzinfo=UTC)
    start = datetime(parsed.year, parsed.month, parsed.day, tzinfo=UTC)
    return (now - start).total_seconds() / 86400.0
