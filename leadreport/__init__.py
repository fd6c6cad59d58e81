"""Monthly and weekly lead generation report built from paginated CRM records."""
from leadreport.core import (
    CalendarCoordinate,
    FilterCriteria,
    PercentageChange,
    ReportOutcome,
    ReportSettings,
    ReportSummary,
    configure_logging,
    load_settings,
)
from leadreport.ingestion import JsonExportSource, ZohoCRMSource, fetch_records
from leadreport.pipeline import build_report, export_report, run_report
from leadreport.processing import accumulate, bucket, build_grid, delta, filter_records, matches, seed
from leadreport.reporting import assemble_report, summary_to_rows

__all__ = [
    "CalendarCoordinate",
    "FilterCriteria",
    "JsonExportSource",
    "PercentageChange",
    "ReportOutcome",
    "ReportSettings",
    "ReportSummary",
    "ZohoCRMSource",
    "accumulate",
    "assemble_report",
    "bucket",
    "build_grid",
    "build_report",
    "configure_logging",
    "delta",
    "export_report",
    "fetch_records",
    "filter_records",
    "load_settings",
    "matches",
    "run_report",
    "seed",
    "summary_to_rows",
]
