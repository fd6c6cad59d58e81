"""Month by week counters for a single report year."""
from __future__ import annotations

from typing import Iterable

from leadreport.core.models import WEEKS, AggregationGrid, CalendarCoordinate, Record, months_of_year
from leadreport.processing.bucketing import bucket


def seed(year: int) -> AggregationGrid:
    """Return twelve months of four zeroed weeks for ``year``."""

    return {label: {week: 0 for week in WEEKS} for label in months_of_year(year)}


def accumulate(grid: AggregationGrid, coordinate: CalendarCoordinate) -> None:
    """Count one lead in the referenced cell; unknown months are ignored."""

    weeks = grid.get(coordinate.month_label)
    if weeks is None or coordinate.week not in weeks:
        return
    weeks[coordinate.week] += 1


def build_grid(records: Iterable[Record], year: int) -> AggregationGrid:
    """Bucket every record of ``year`` into a freshly seeded grid."""

    grid = seed(year)
    for record in records:
        coordinate = bucket(record, year)
        if coordinate is not None:
            accumulate(grid, coordinate)
    return grid


def month_total(grid: AggregationGrid, label: str) -> int:
    return sum(grid.get(label, {}).values())
