"""Data models for the lead aggregation report."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Tuple

MONTH_NAMES = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")
WEEKS = (1, 2, 3, 4)

DEFAULT_LEAD_SOURCES = (
    "Zoho Leads",
    "Zoho Partner",
    "Zoho CRM",
    "Zoho Partners 2024",
    "Zoho - Sutha",
    "Zoho - Hemanth",
    "Zoho - Sen",
    "Zoho - Audrey",
    "Zoho - Jacklyn",
    "Zoho - Adrian",
    "Zoho Partner Website",
    "Zoho - Chaitanya",
)
DEFAULT_SERVICES = ("Desk", "Workplace", "Projects", "Mail")

Record = Mapping[str, Any]
AggregationGrid = Dict[str, Dict[int, int]]


def month_label(month: int, year: int) -> str:
    """Return the grid key for a month, e.g. ``Mar 2025``."""

    return f"{MONTH_NAMES[month - 1]} {year}"


def months_of_year(year: int) -> List[str]:
    """Return the twelve month labels of a year in calendar order."""

    return [month_label(month, year) for month in range(1, 13)]


@dataclass(frozen=True)
class FilterCriteria:
    """Allow-lists a lead must satisfy to be counted."""

    sources: frozenset = frozenset(DEFAULT_LEAD_SOURCES)
    services: frozenset = frozenset(DEFAULT_SERVICES)


@dataclass(frozen=True)
class CalendarCoordinate:
    """Grid position of a single lead."""

    year: int
    month: int
    week: int

    @property
    def month_label(self) -> str:
        return month_label(self.month, self.year)


class DeltaKind(str, Enum):
    NONE = "none"
    UNBOUNDED = "unbounded"
    ZERO_BASELINE = "zero_baseline"
    PERCENT = "percent"


@dataclass(frozen=True)
class PercentageChange:
    """Period-over-period change attached to a report cell."""

    kind: DeltaKind
    value: Optional[float] = None
    sign: Optional[str] = None

    @property
    def label(self) -> str:
        if self.kind is DeltaKind.NONE:
            return ""
        if self.kind is DeltaKind.UNBOUNDED:
            return "+∞"
        if self.kind is DeltaKind.ZERO_BASELINE:
            return "0%"
        prefix = "+" if self.sign == "positive" else ""
        return f"{prefix}{self.value:.1f}%"


@dataclass(frozen=True)
class ReportCell:
    month_label: str
    count: int
    change: PercentageChange

    def display(self) -> str:
        """Render the cell as ``count (change)`` for tabular exports."""

        label = self.change.label
        return f"{self.count} ({label})" if label else str(self.count)


@dataclass(frozen=True)
class ReportRow:
    label: str
    cells: Tuple[ReportCell, ...]


@dataclass(frozen=True)
class ReportSummary:
    """Read-only view of one report run, ready for rendering or export."""

    year: int
    months: Tuple[str, ...]
    week_rows: Tuple[ReportRow, ...]
    total_row: ReportRow
    grand_total: int
    total_fetched: int
    total_matched: int
    fetch_complete: bool = True
    generated_at: Optional[datetime] = None


@dataclass
class FetchResult:
    """Records returned by the paged fetch loop and how the loop ended."""

    records: List[Record] = field(default_factory=list)
    pages_fetched: int = 0
    complete: bool = True
    error: Optional[str] = None

    @property
    def total_fetched(self) -> int:
        return len(self.records)


@dataclass
class ReportOutcome:
    """Terminal state of a report run as seen by the CLI or dashboard."""

    status: str
    summary: Optional[ReportSummary] = None
    message: Optional[str] = None
    fetch: Optional[FetchResult] = None
