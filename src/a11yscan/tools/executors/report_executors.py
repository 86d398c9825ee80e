"""Executors for report tools (summarize, write report)."""

from __future__ import annotations

import logging
from typing import Any

from a11yscan.errors import ExportError
from a11yscan.modules.report import (
    export_report,
    parse_format,
    parse_violations,
    render_summary,
    summarize_violations,
)

from .context import ToolContext, ToolResponse

logger = logging.getLogger(__name__)


async def execute_summarize_violations(
    params: dict[str, Any], context: ToolContext
) -> ToolResponse:
    """Return impact counts and condensed entries in the requested format."""
    try:
        violations = parse_violations(params.get("violations"))
        report_format = parse_format(params.get("format"))
        logger.info("Summarizing %d accessibility violations", len(violations))
        summary = summarize_violations(violations)
        text = render_summary(report_format, summary, violations)
    except Exception as exc:
        logger.error("Error summarizing violations: %s", exc)
        return ToolResponse.error(f"Error summarizing violations content: {exc}")
    logger.info("Summary generated for %d violations", len(violations))
    return ToolResponse(content=[text])


async def execute_write_violations_report(
    params: dict[str, Any], context: ToolContext
) -> ToolResponse:
    """Summarize like ``summarize-violations`` and persist the result to disk.

    When only the write fails, the summary is still returned after the error text.
    """
    try:
        violations = parse_violations(params.get("violations"))
        report_format = parse_format(params.get("format"))
    except Exception as exc:
        logger.error("Error summarizing violations: %s", exc)
        return ToolResponse.error(f"Error summarizing violations content: {exc}")

    logger.info("Writing %d accessibility violations report", len(violations))
    try:
        record = export_report(violations, report_format, context.settings.results_directory)
    except ExportError as exc:
        logger.error("Error writing violations report: %s", exc)
        summary = summarize_violations(violations)
        text = render_summary(report_format, summary, violations)
        return ToolResponse.error(f"Error writing violations report: {exc}", text)
    return ToolResponse(content=[record.content, f"Report written to {record.path}"])
