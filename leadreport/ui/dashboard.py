"""Streamlit dashboard that renders the lead generation report."""
import html
from pathlib import Path

import streamlit as st

# Allow running via "streamlit run leadreport/ui/dashboard.py" without installing the package
# by ensuring the repository root is on ``sys.path``.
if __package__ in {None, ""}:
    import sys

    sys.path.append(str(Path(__file__).resolve().parents[2]))

from leadreport.core.config import ReportSettings, load_settings
from leadreport.core.logging import configure_logging
from leadreport.core.models import PercentageChange, ReportOutcome, ReportSummary
from leadreport.ingestion.sources import JsonExportSource, ZohoCRMSource
from leadreport.pipeline import export_report, incomplete_fetch_warning, run_report
from leadreport.reporting.templates import summary_footer

SIGN_COLORS = {"positive": "green", "negative": "red", "neutral": "gray"}
CELL_STYLE = "padding:10px;border:1px solid #ddd;text-align:center;"


def _rerun_app() -> None:
    """Trigger a Streamlit rerun, compatible with newer and older APIs."""

    rerun = getattr(st, "rerun", None) or getattr(st, "experimental_rerun", None)
    if not rerun:
        raise RuntimeError("Streamlit does not expose a rerun helper.")
    rerun()


def _change_badge(change: PercentageChange) -> str:
    """Return the colored ``(+12.5%)`` marker shown next to a count."""

    if not change.label:
        return ""
    color = SIGN_COLORS.get(change.sign or "neutral", "gray")
    weight = "" if change.sign == "neutral" else " font-weight:bold;"
    return f' <span style="color:{color};{weight}">({html.escape(change.label)})</span>'


def _summary_table_html(summary: ReportSummary) -> str:
    header = "".join(f'<th style="{CELL_STYLE}">{html.escape(label)}</th>' for label in summary.months)
    body = []
    for index, row in enumerate(summary.week_rows, start=1):
        background = "white" if index % 2 else "#f9f9f9"
        cells = "".join(
            f'<td style="{CELL_STYLE}">{cell.count}{_change_badge(cell.change)}</td>' for cell in row.cells
        )
        body.append(
            f'<tr style="background:{background};">'
            f'<td style="{CELL_STYLE}font-weight:bold;">{row.label}</td>{cells}</tr>'
        )
    total_cells = "".join(
        f'<td style="{CELL_STYLE}"><strong>{cell.count}{_change_badge(cell.change)}</strong></td>'
        for cell in summary.total_row.cells
    )
    body.append(
        f'<tr style="background:#f0f1f2;font-weight:bold;">'
        f'<td style="{CELL_STYLE}">{summary.total_row.label}</td>{total_cells}</tr>'
    )
    return (
        '<table style="border-collapse:collapse;width:100%;margin:20px 0;">'
        f'<thead><tr style="background:#4CAF50;color:white;"><th style="{CELL_STYLE}">Week</th>{header}</tr></thead>'
        f"<tbody>{''.join(body)}</tbody></table>"
    )


def _load_outcome(settings: ReportSettings, input_path: str) -> ReportOutcome:
    """Run the report once per session; the Retry button clears the cached outcome."""

    if "outcome" not in st.session_state:
        try:
            source = (
                JsonExportSource(Path(input_path)) if input_path else ZohoCRMSource.from_settings(settings)
            )
        except ValueError as exc:
            st.session_state.outcome = ReportOutcome(status="error", message=f"Error loading report: {exc}")
            return st.session_state.outcome

        with st.spinner(f"Loading filtered lead data for {settings.year}..."):
            st.session_state.outcome = run_report(
                source,
                settings.year,
                criteria=settings.criteria,
                entity=settings.entity,
                page_size=settings.page_size,
                max_pages=settings.max_pages,
            )
    return st.session_state.outcome


def _render_summary(summary: ReportSummary) -> None:
    st.subheader(f"Lead Generation Report - {summary.year}")
    st.markdown(_summary_table_html(summary), unsafe_allow_html=True)

    metric_cols = st.columns(3)
    metric_cols[0].metric("Filtered Leads", summary.grand_total)
    metric_cols[1].metric("Matched Leads", summary.total_matched)
    metric_cols[2].metric("Total Fetched", summary.total_fetched)
    with st.expander("Report details", expanded=False):
        st.dataframe(summary_footer(summary), use_container_width=True, hide_index=True)
    st.caption("Week-over-week and month-over-month percentage changes shown.")


def _render_export(summary: ReportSummary) -> None:
    st.markdown("### Export")
    sink = st.radio(
        "Choose destination",
        options=["csv", "excel", "sheets"],
        format_func=lambda value: value.upper(),
        horizontal=True,
    )
    output_path = Path(st.text_input("CSV file path", value="output/lead_report.csv"))
    spreadsheet_id = ""
    worksheet = "Sheet1"
    service_account = ""
    if sink == "sheets":
        sheet_cols = st.columns(3)
        spreadsheet_id = sheet_cols[0].text_input("Spreadsheet ID")
        worksheet = sheet_cols[1].text_input("Worksheet title", value="Sheet1")
        service_account = sheet_cols[2].text_input(
            "Service account JSON", help="Defaults to secrets/service_account.json"
        )

    if st.button("Export report", type="primary"):
        try:
            export_report(
                summary,
                output_path,
                sink=sink,
                spreadsheet_id=spreadsheet_id.strip() or None,
                worksheet_title=worksheet.strip() or "Sheet1",
                service_account_path=Path(service_account) if service_account.strip() else None,
                excel_path=output_path.with_suffix(".xlsx"),
            )
        except Exception as exc:  # pragma: no cover - defensive UI feedback
            st.error(f"Export failed: {exc}")
        else:
            st.success(f"Report exported ({sink.upper()}).")


def main() -> None:
    """Launch the report dashboard."""

    configure_logging()
    st.set_page_config(page_title="Lead Generation Report", layout="wide")
    st.title("Lead Generation Report")

    try:
        settings = load_settings()
    except ValueError as exc:
        st.error(f"Invalid configuration: {exc}")
        return

    with st.sidebar:
        st.subheader("Data source")
        input_path = st.text_input(
            "JSON export (optional)",
            value=st.session_state.get("input_path", ""),
            help="Leave empty to fetch leads from the Zoho CRM API.",
        )
        st.caption(f"Report year: {settings.year}")
        st.caption(f"Lead sources: {len(settings.criteria.sources)} | Services: {len(settings.criteria.services)}")
        if input_path != st.session_state.get("input_path", ""):
            st.session_state.input_path = input_path
            st.session_state.pop("outcome", None)
        if st.button("Reload data", type="secondary"):
            st.session_state.pop("outcome", None)
            _rerun_app()

    outcome = _load_outcome(settings, input_path)

    if outcome.status == "error":
        st.error(f"**Error Loading Report**\n\n{outcome.message}")
        if st.button("Retry", type="primary"):
            st.session_state.pop("outcome", None)
            _rerun_app()
        return

    warning = incomplete_fetch_warning(outcome.fetch)
    if warning:
        st.warning(f"**Incomplete Data**\n\n{warning}")

    if outcome.status == "no_data":
        st.warning(f"**No Matching Leads Found**\n\n{outcome.message}")
        return

    _render_summary(outcome.summary)
    _render_export(outcome.summary)


if __name__ == "__main__":
    main()
