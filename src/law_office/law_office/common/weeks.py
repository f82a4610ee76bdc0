"""ISO-8601 week buckets used to archive cases and run weekly payroll.

A bucket key looks like ``2025-W01``: the ISO year (which can differ from the
calendar year around New Year) and the zero-padded ISO week number.
"""

from __future__ import annotations

import re
from datetime import date, datetime, timezone
from typing import Callable

from ..core.exceptions import ValidationError
from .datetime_utils import now_utc

_WEEK_KEY_RE = re.compile(r"^([1-9]\d{3})-W(\d{2})$")


def week_key(value: date | datetime) -> str:
    """Return the ISO week bucket of a date or datetime.

    Datetimes are normalized to UTC first; naive datetimes are taken as UTC.
    """
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        value = value.date()
    iso_year, iso_week, _ = value.isocalendar()
    return f"{iso_year:04d}-W{iso_week:02d}"


def current_week_key(clock: Callable[[], datetime] = now_utc) -> str:
    return week_key(clock())


def parse_week_key(value: str) -> str:
    """Validate a week key coming from a caller and return it normalized."""
    m = _WEEK_KEY_RE.match((value or "").strip())
    if not m:
        raise ValidationError(f"Invalid week key: {value!r} (expected YYYY-Www)")

    year, week = int(m.group(1)), int(m.group(2))
    # Dec 28 always falls in the last ISO week of its year.
    last_week = date(year, 12, 28).isocalendar()[1]
    if week < 1 or week > last_week:
        raise ValidationError(f"Invalid week number in {value!r}")
    return f"{year:04d}-W{week:02d}"
