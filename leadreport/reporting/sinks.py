"""Destinations for the rendered report table: CSV, Excel, and Google Sheets."""
from __future__ import annotations

import csv
from pathlib import Path
from typing import Any, Dict, List, Sequence

# Week label column plus header row stay visible while scrolling through months.
FROZEN_CELL = "B2"


def ensure_output_dir(output_path: Path) -> None:
    """Create parent folders for sink outputs when missing."""

    output_path.parent.mkdir(parents=True, exist_ok=True)


def _table(rows: Sequence[Dict[str, Any]]) -> List[List[Any]]:
    headers: List[str] = list(rows[0].keys())
    return [headers] + [[row.get(header, "") for header in headers] for row in rows]


def push_to_google_sheets(
    rows: Sequence[Dict[str, Any]],
    spreadsheet_id: str,
    worksheet_title: str = "Sheet1",
    service_account_path: Path | None = None,
) -> None:
    """Replace the worksheet contents with the report table."""

    if not rows:
        return

    import gspread

    if service_account_path:
        client = gspread.service_account(filename=str(service_account_path))
    else:
        client = gspread.service_account()
    worksheet = client.open_by_key(spreadsheet_id).worksheet(worksheet_title)
    worksheet.clear()
    worksheet.update(values=_table(rows), range_name="A1")
    worksheet.freeze(rows=1, cols=1)


def write_excel(rows: Sequence[Dict[str, Any]], output_path: Path, sheet_title: str = "lead_report") -> None:
    """Write the report table to a workbook with a bold, frozen header row."""

    if not rows:
        return

    from openpyxl import Workbook
    from openpyxl.styles import Font

    ensure_output_dir(output_path)
    workbook = Workbook()
    sheet = workbook.active
    sheet.title = sheet_title
    for values in _table(rows):
        sheet.append(values)
    for cell in sheet[1]:
        cell.font = Font(bold=True)
    sheet.freeze_panes = FROZEN_CELL
    workbook.save(output_path)


def write_csv(rows: Sequence[Dict[str, Any]], output_path: Path) -> None:
    """Write report rows to a CSV file, using the first row's keys as headers."""

    ensure_output_dir(output_path)
    if not rows:
        return

    with output_path.open("w", newline="", encoding="utf-8") as csvfile:
        writer = csv.DictWriter(csvfile, fieldnames=list(rows[0].keys()))
        writer.writeheader()
        writer.writerows(rows)
