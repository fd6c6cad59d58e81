"""Map loosely typed creation timestamps onto the month/week grid."""
from __future__ import annotations

import math
import re
from datetime import date, datetime, timezone
from typing import Any, Optional

from leadreport.core.models import CalendarCoordinate, Record, months_of_year
from leadreport.core.utils import first_present

CREATED_TIME_ALIASES = ("Created_Time", "created_time", "Created_Date", "created_date")

DATE_FORMATS = (
    "%Y-%m-%d %H:%M:%S",
    "%Y-%m-%d %H:%M:%S.%f",
    "%Y-%m-%d %H:%M",
    "%Y-%m-%d",
    "%Y/%m/%d %H:%M:%S",
    "%Y/%m/%d",
)

_OFFSET_MARKER = re.compile(r"[+Z]")
_TRAILING_NEGATIVE_OFFSET = re.compile(r"(\d{2}:\d{2}(?::\d{2}(?:\.\d+)?)?)-\d{2}:?\d{2}$")


def normalize_timestamp(raw: str) -> str:
    """Drop the UTC offset and turn the ISO ``T`` separator into a space.

    ``2025-03-04T10:15:00+05:30`` and ``2025-03-04T10:15:00-05:00`` both
    become ``2025-03-04 10:15:00``; the wall clock time is kept as-is.
    """

    text = _OFFSET_MARKER.split(raw, maxsplit=1)[0].replace("T", " ").strip()
    return _TRAILING_NEGATIVE_OFFSET.sub(r"\1", text)


def parse_created_time(value: Any) -> Optional[datetime]:
    """Return a naive datetime for a creation timestamp, or None if unusable."""

    if isinstance(value, datetime):
        return value.replace(tzinfo=None)
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        # Epoch milliseconds, as emitted by JavaScript date serializers.
        try:
            return datetime.fromtimestamp(value / 1000, tz=timezone.utc).replace(tzinfo=None)
        except (OverflowError, OSError, ValueError):
            return None
    if not isinstance(value, str):
        return None

    text = normalize_timestamp(value)
    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    return None


def week_of_month(day: int) -> int:
    """Days 1-7 map to week 1, 8-14 to 2, 15-21 to 3, and 22 onward to 4."""

    return min(4, max(1, math.ceil(day / 7)))


def bucket(record: Record, target_year: int) -> Optional[CalendarCoordinate]:
    """Return the grid coordinate for a record, or None when it is rejected."""

    raw = first_present(record, CREATED_TIME_ALIASES)
    if raw is None:
        return None

    created = parse_created_time(raw)
    if created is None or created.year != target_year:
        return None

    coordinate = CalendarCoordinate(year=created.year, month=created.month, week=week_of_month(created.day))
    if coordinate.month_label not in months_of_year(target_year):
        return None
    return coordinate
