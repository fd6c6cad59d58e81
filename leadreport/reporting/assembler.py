"""Compose the month by week grid into the presentable report summary."""
from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from leadreport.core.models import (
    WEEKS,
    AggregationGrid,
    ReportCell,
    ReportRow,
    ReportSummary,
    months_of_year,
)
from leadreport.processing.deltas import delta
from leadreport.processing.grid import month_total


def _previous_week_count(grid: AggregationGrid, months: List[str], index: int, week: int) -> Optional[int]:
    """Week N compares with week N-1 of the same month; week 1 with the prior month's week 4."""

    if week > 1:
        return grid[months[index]][week - 1]
    if index > 0:
        return grid[months[index - 1]][4]
    return None


def assemble_report(
    grid: AggregationGrid,
    year: int,
    total_fetched: int,
    total_matched: int,
    fetch_complete: bool = True,
    generated_at: Optional[datetime] = None,
) -> ReportSummary:
    """Build week rows, the monthly total row, and the scalar totals."""

    months = months_of_year(year)
    missing = [label for label in months if label not in grid]
    if missing:
        raise ValueError(f"Grid is missing months for {year}: {', '.join(missing)}")

    week_rows = []
    for week in WEEKS:
        cells = []
        for index, label in enumerate(months):
            count = grid[label][week]
            previous = _previous_week_count(grid, months, index, week)
            cells.append(ReportCell(month_label=label, count=count, change=delta(count, previous)))
        week_rows.append(ReportRow(label=f"Week {week}", cells=tuple(cells)))

    totals = [month_total(grid, label) for label in months]
    total_cells = tuple(
        ReportCell(
            month_label=label,
            count=total,
            change=delta(total, totals[index - 1] if index > 0 else None),
        )
        for index, (label, total) in enumerate(zip(months, totals))
    )

    return ReportSummary(
        year=year,
        months=tuple(months),
        week_rows=tuple(week_rows),
        total_row=ReportRow(label="Monthly Total", cells=total_cells),
        grand_total=sum(totals),
        total_fetched=total_fetched,
        total_matched=total_matched,
        fetch_complete=fetch_complete,
        generated_at=generated_at,
    )
