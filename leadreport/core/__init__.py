"""Core building blocks for the lead report package."""
from leadreport.core.config import ReportSettings, load_settings
from leadreport.core.errors import ReportBuildError, SourceRequestError
from leadreport.core.logging import configure_logging
from leadreport.core.models import (
    AggregationGrid,
    CalendarCoordinate,
    DeltaKind,
    FetchResult,
    FilterCriteria,
    PercentageChange,
    ReportCell,
    ReportOutcome,
    ReportRow,
    ReportSummary,
    month_label,
    months_of_year,
)
from leadreport.core.utils import first_present

__all__ = [
    "AggregationGrid",
    "CalendarCoordinate",
    "DeltaKind",
    "FetchResult",
    "FilterCriteria",
    "PercentageChange",
    "ReportBuildError",
    "ReportCell",
    "ReportOutcome",
    "ReportRow",
    "ReportSettings",
    "ReportSummary",
    "SourceRequestError",
    "configure_logging",
    "first_present",
    "load_settings",
    "month_label",
    "months_of_year",
]
