"""Report table sinks."""
import sys
from pathlib import Path
from types import SimpleNamespace

from openpyxl import load_workbook

from leadreport.reporting.sinks import push_to_google_sheets, write_csv, write_excel

ROWS = [
    {"Week": "Week 1", "Jan 2025": "2", "Feb 2025": "1 (-50.0%)"},
    {"Week": "Monthly Total", "Jan 2025": "2", "Feb 2025": "1 (-50.0%)"},
]


class FakeWorksheet:
    def __init__(self) -> None:
        self.calls = []

    def clear(self) -> None:
        self.calls.append(("clear",))

    def update(self, values=None, range_name=None) -> None:
        self.calls.append(("update", range_name, values))

    def freeze(self, rows=None, cols=None) -> None:
        self.calls.append(("freeze", rows, cols))


def _fake_gspread(monkeypatch, worksheet: FakeWorksheet) -> dict:
    opened = {}

    def select_worksheet(title):
        opened["title"] = title
        return worksheet

    def open_by_key(key):
        opened["key"] = key
        return SimpleNamespace(worksheet=select_worksheet)

    def service_account(filename=None):
        opened["filename"] = filename
        return SimpleNamespace(open_by_key=open_by_key)

    monkeypatch.setitem(sys.modules, "gspread", SimpleNamespace(service_account=service_account))
    return opened


def test_push_to_google_sheets_replaces_worksheet_contents(monkeypatch, fake_service_account_file: Path):
    worksheet = FakeWorksheet()
    opened = _fake_gspread(monkeypatch, worksheet)

    push_to_google_sheets(ROWS, "sheet-123", "Leads", service_account_path=fake_service_account_file)

    assert opened == {"filename": str(fake_service_account_file), "key": "sheet-123", "title": "Leads"}
    assert worksheet.calls == [
        ("clear",),
        (
            "update",
            "A1",
            [
                ["Week", "Jan 2025", "Feb 2025"],
                ["Week 1", "2", "1 (-50.0%)"],
                ["Monthly Total", "2", "1 (-50.0%)"],
            ],
        ),
        ("freeze", 1, 1),
    ]


def test_push_to_google_sheets_skips_empty_table(monkeypatch):
    worksheet = FakeWorksheet()
    opened = _fake_gspread(monkeypatch, worksheet)

    push_to_google_sheets([], "sheet-123")

    assert opened == {}
    assert worksheet.calls == []


def test_write_excel_freezes_week_column_and_header(tmp_path: Path):
    path = tmp_path / "out" / "report.xlsx"

    write_excel(ROWS, path)

    sheet = load_workbook(path).active
    assert sheet.freeze_panes == "B2"
    assert [cell.value for cell in sheet[1]] == ["Week", "Jan 2025", "Feb 2025"]
    assert all(cell.font.bold for cell in sheet[1])
    assert not sheet["A2"].font.bold


def test_write_csv_with_no_rows_only_creates_folder(tmp_path: Path):
    path = tmp_path / "out" / "report.csv"

    write_csv([], path)

    assert path.parent.is_dir()
    assert not path.exists()
