"""Report content and renderers for assessment results."""

from rainwise.reports.base import (
    ReportGenerationError,
    ReportRenderer,
    report_filename,
    write_report,
)
from rainwise.reports.content import RECOMMENDATIONS, build_report_content
from rainwise.reports.csv import CSVResultWriter
from rainwise.reports.pdf import PDFReportRenderer
from rainwise.reports.text import PlainTextReportRenderer

__all__ = [
    "RECOMMENDATIONS",
    "CSVResultWriter",
    "PDFReportRenderer",
    "PlainTextReportRenderer",
    "ReportGenerationError",
    "ReportRenderer",
    "build_report_content",
    "report_filename",
    "write_report",
]
