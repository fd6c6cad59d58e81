"""Report assembly and export destinations."""
from leadreport.reporting.assembler import assemble_report
from leadreport.reporting.sinks import ensure_output_dir, push_to_google_sheets, write_csv, write_excel
from leadreport.reporting.templates import summary_footer, summary_to_rows

__all__ = [
    "assemble_report",
    "ensure_output_dir",
    "push_to_google_sheets",
    "summary_footer",
    "summary_to_rows",
    "write_csv",
    "write_excel",
]
