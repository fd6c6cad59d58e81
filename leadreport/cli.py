"""Command line entry point for the lead generation report."""
import argparse
import sys
from dataclasses import replace
from pathlib import Path

from leadreport.core.config import load_settings
from leadreport.core.logging import configure_logging
from leadreport.core.models import ReportSummary
from leadreport.ingestion.sources import JsonExportSource, ZohoCRMSource
from leadreport.pipeline import export_report, incomplete_fetch_warning, run_report
from leadreport.reporting.templates import summary_footer, summary_to_rows


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI entry point."""

    parser = argparse.ArgumentParser(description="Build the monthly/weekly lead generation report")
    parser.add_argument("--year", type=int, help="Report year (defaults to LEAD_REPORT_YEAR or 2025)")
    parser.add_argument(
        "--input",
        type=Path,
        help="JSON export of CRM leads; the Zoho CRM API is used when omitted",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=Path("output/lead_report.csv"),
        help="CSV file to write the report table to",
    )
    parser.add_argument(
        "--sink",
        choices=["csv", "sheets", "excel"],
        default="csv",
        help="Where to forward the report table after writing the CSV",
    )
    parser.add_argument(
        "--spreadsheet-id",
        help="Google Sheets spreadsheet ID for the sheets sink",
    )
    parser.add_argument(
        "--worksheet",
        default="Sheet1",
        help="Worksheet title inside the Google Sheets document",
    )
    parser.add_argument(
        "--service-account",
        type=Path,
        help="Path to a Google service account JSON key used for Sheets pushes",
    )
    parser.add_argument(
        "--excel-output",
        type=Path,
        default=Path("output/lead_report.xlsx"),
        help="Excel file to write when --sink=excel",
    )
    parser.add_argument("--page-size", type=int, help="Records requested per page")
    parser.add_argument("--max-pages", type=int, help="Hard ceiling on the number of pages fetched")
    return parser


def format_summary(summary: ReportSummary) -> str:
    """Render the report as a plain-text table for the terminal."""

    rows = summary_to_rows(summary)
    headers = list(rows[0].keys())
    widths = [max(len(str(header)), *(len(str(row[header])) for row in rows)) for header in headers]

    def _line(values) -> str:
        return "  ".join(str(value).ljust(width) for value, width in zip(values, widths))

    lines = [_line(headers), _line("-" * width for width in widths)]
    lines.extend(_line(row[header] for header in headers) for row in rows)
    lines.append("")
    lines.extend(f"{item['Metric']}: {item['Value']}" for item in summary_footer(summary))
    return "\n".join(lines)


def main() -> None:
    """Entrypoint for running the report from the command line."""

    configure_logging()
    args = build_parser().parse_args()

    settings = load_settings()
    overrides = {
        key: value
        for key, value in {"year": args.year, "page_size": args.page_size, "max_pages": args.max_pages}.items()
        if value is not None
    }
    if overrides:
        settings = replace(settings, **overrides)
        settings.validate()

    source = JsonExportSource(args.input) if args.input else ZohoCRMSource.from_settings(settings)
    outcome = run_report(
        source,
        settings.year,
        criteria=settings.criteria,
        entity=settings.entity,
        page_size=settings.page_size,
        max_pages=settings.max_pages,
    )

    if outcome.status == "error":
        print(outcome.message, file=sys.stderr)
        print("Re-run the command to retry.", file=sys.stderr)
        raise SystemExit(1)
    warning = incomplete_fetch_warning(outcome.fetch)
    if warning:
        print(f"Warning: {warning}", file=sys.stderr)
    if outcome.status == "no_data":
        print(outcome.message)
        return

    output_path = export_report(
        outcome.summary,
        args.output,
        sink=args.sink,
        spreadsheet_id=args.spreadsheet_id,
        worksheet_title=args.worksheet,
        service_account_path=args.service_account,
        excel_path=args.excel_output,
    )
    print(format_summary(outcome.summary))
    print(f"Wrote {output_path}")


if __name__ == "__main__":
    main()
