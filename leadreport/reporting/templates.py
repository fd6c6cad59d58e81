"""Flatten a report summary into spreadsheet-friendly rows."""
from typing import Any, Dict, List

from leadreport.core.models import ReportRow, ReportSummary


def _row_to_dict(row: ReportRow) -> Dict[str, Any]:
    values: Dict[str, Any] = {"Week": row.label}
    for cell in row.cells:
        values[cell.month_label] = cell.display()
    return values


def summary_to_rows(summary: ReportSummary) -> List[Dict[str, Any]]:
    """Return the four week rows followed by the monthly total row."""

    return [_row_to_dict(row) for row in (*summary.week_rows, summary.total_row)]


def summary_footer(summary: ReportSummary) -> List[Dict[str, Any]]:
    """Key figures shown under the table."""

    generated = summary.generated_at.strftime("%Y-%m-%d %H:%M:%S") if summary.generated_at else ""
    footer = [
        {"Metric": "Filtered Leads", "Value": summary.grand_total},
        {"Metric": "Matched Leads", "Value": summary.total_matched},
        {"Metric": "Total Fetched", "Value": summary.total_fetched},
        {"Metric": "Report Period", "Value": f"Jan - Dec {summary.year}"},
        {"Metric": "Generated", "Value": generated},
    ]
    if not summary.fetch_complete:
        footer.append({"Metric": "Warning", "Value": "Fetching stopped early; counts may be incomplete"})
    return footer
