"""Violation summaries, renderings and report export."""

from .export import export_report, write_report_file
from .models import ExportRecord, ImpactTally, ReportFormat, SummaryEntry, ViolationSummary
from .renderers import RENDERERS, render_summary
from .summary import summarize_violations, tally_by_impact
from .validation import parse_format, parse_violations

__all__ = [
    "ExportRecord",
    "ImpactTally",
    "RENDERERS",
    "ReportFormat",
    "SummaryEntry",
    "ViolationSummary",
    "export_report",
    "parse_format",
    "parse_violations",
    "render_summary",
    "summarize_violations",
    "tally_by_impact",
    "write_report_file",
]
