"""Tool schema definitions for a11yscan capabilities."""

from typing import Any

from .report_tools import SUMMARIZE_VIOLATIONS_TOOL, WRITE_VIOLATIONS_REPORT_TOOL
from .scan_tools import SCAN_BATCH_TOOL, SCAN_HTML_TOOL, SCAN_URL_TOOL

__all__ = [
    "SCAN_BATCH_TOOL",
    "SCAN_HTML_TOOL",
    "SCAN_URL_TOOL",
    "SUMMARIZE_VIOLATIONS_TOOL",
    "WRITE_VIOLATIONS_REPORT_TOOL",
    "get_all_tools",
]


def get_all_tools() -> list[dict[str, Any]]:
    """Return all tool definitions in registration order."""
    return [
        SCAN_URL_TOOL,
        SCAN_HTML_TOOL,
        SCAN_BATCH_TOOL,
        SUMMARIZE_VIOLATIONS_TOOL,
        WRITE_VIOLATIONS_REPORT_TOOL,
    ]
