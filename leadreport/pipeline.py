"""Report orchestration: fetch, filter, bucket, assemble, and export."""
import asyncio
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional

from leadreport.core.errors import ReportBuildError
from leadreport.core.models import FetchResult, FilterCriteria, ReportOutcome, ReportSummary
from leadreport.ingestion.fetcher import DEFAULT_PAGE_SIZE, MAX_PAGES, fetch_records
from leadreport.ingestion.sources import RecordSource
from leadreport.processing.filters import filter_records
from leadreport.processing.grid import build_grid
from leadreport.reporting.assembler import assemble_report
from leadreport.reporting.sinks import push_to_google_sheets, write_csv, write_excel
from leadreport.reporting.templates import summary_to_rows

DEFAULT_SERVICE_ACCOUNT_PATHS = [
    Path("secrets/service_account.json"),
    Path("credentials/service_account.json"),
]
NO_DATA_MESSAGE = "No leads found matching the specified Lead Source and Zoho Service criteria."


logger = logging.getLogger(__name__)


async def build_report(
    source: RecordSource,
    year: int,
    criteria: FilterCriteria | None = None,
    entity: str = "Leads",
    page_size: int = DEFAULT_PAGE_SIZE,
    max_pages: int = MAX_PAGES,
) -> ReportOutcome:
    """Fetch every page, keep allowed leads, and summarize them for ``year``."""

    criteria = criteria or FilterCriteria()
    logger.info("Report starting for %s in %d", entity, year)

    fetched = await fetch_records(source, entity=entity, page_size=page_size, max_pages=max_pages)
    if not fetched.complete:
        logger.warning(
            "Fetching stopped after %d page(s): %s; the report may be incomplete",
            fetched.pages_fetched,
            fetched.error,
        )

    matched = filter_records(fetched.records, criteria)
    logger.info("%d of %d fetched records passed the filters", len(matched), fetched.total_fetched)
    if not matched:
        return ReportOutcome(status="no_data", message=NO_DATA_MESSAGE, fetch=fetched)

    grid = build_grid(matched, year)
    try:
        summary = assemble_report(
            grid,
            year,
            total_fetched=fetched.total_fetched,
            total_matched=len(matched),
            fetch_complete=fetched.complete,
            generated_at=datetime.now(),
        )
    except ValueError as exc:
        raise ReportBuildError(str(exc)) from exc

    logger.info("Report for %d counts %d leads", year, summary.grand_total)
    return ReportOutcome(status="ok", summary=summary, fetch=fetched)


def run_report(
    source: RecordSource,
    year: int,
    criteria: FilterCriteria | None = None,
    entity: str = "Leads",
    page_size: int = DEFAULT_PAGE_SIZE,
    max_pages: int = MAX_PAGES,
) -> ReportOutcome:
    """Run ``build_report`` to completion and turn failures into an error outcome."""

    try:
        return asyncio.run(
            build_report(
                source,
                year,
                criteria=criteria,
                entity=entity,
                page_size=page_size,
                max_pages=max_pages,
            )
        )
    except Exception as exc:
        logger.exception("Report generation failed")
        return ReportOutcome(status="error", message=f"Error loading report: {exc}")


def incomplete_fetch_warning(fetch: Optional[FetchResult]) -> Optional[str]:
    """Describe why the fetch loop stopped early, or ``None`` when it ran to the end."""

    if fetch is None or fetch.complete:
        return None
    return (
        f"Fetching stopped after {fetch.pages_fetched} page(s): {fetch.error}. "
        "Results are incomplete."
    )


def _default_service_account_path() -> Optional[Path]:
    for candidate in DEFAULT_SERVICE_ACCOUNT_PATHS:
        if candidate.exists():
            return candidate
    return None


def _resolve_sheets_target(
    spreadsheet_id: Optional[str],
    worksheet_title: str,
    explicit_account_path: Optional[Path],
) -> Dict[str, Any]:
    if not spreadsheet_id:
        raise ValueError("spreadsheet_id is required when sink='sheets'")

    account_path = explicit_account_path or _default_service_account_path()
    if not account_path:
        raise ValueError(
            "Provide --service-account pointing to your Google credentials or place a file at "
            f"{DEFAULT_SERVICE_ACCOUNT_PATHS[0]}"
        )

    return {
        "spreadsheet_id": spreadsheet_id,
        "worksheet_title": worksheet_title,
        "service_account_path": account_path,
    }


def export_report(
    summary: ReportSummary,
    output_path: Path,
    sink: str = "csv",
    spreadsheet_id: str | None = None,
    worksheet_title: str = "Sheet1",
    service_account_path: Path | None = None,
    excel_path: Path | None = None,
) -> Path:
    """Write the report table to CSV and forward it to the chosen sink."""

    rows = summary_to_rows(summary)
    write_csv(rows, output_path)
    logger.info("Wrote CSV output to %s", output_path)

    if sink == "excel":
        excel_target = excel_path or output_path.with_suffix(".xlsx")
        write_excel(rows, excel_target)
        logger.info("Wrote Excel output to %s", excel_target)
    elif sink == "sheets":
        target = _resolve_sheets_target(
            spreadsheet_id=spreadsheet_id,
            worksheet_title=worksheet_title,
            explicit_account_path=service_account_path,
        )
        push_to_google_sheets(rows, **target)
        logger.info(
            "Pushed %d rows to Google Sheets document %s (worksheet %s)",
            len(rows),
            target["spreadsheet_id"],
            target["worksheet_title"],
        )
    return output_path
