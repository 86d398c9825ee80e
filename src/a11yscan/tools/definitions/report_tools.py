"""Tool schemas for summarizing and exporting violations."""

from typing import Any

from a11yscan.modules.report.models import ReportFormat
from a11yscan.modules.scan.models import Impact

_VIOLATIONS_INPUT_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "violations": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "id": {"type": "string"},
                    "impact": {"type": "string", "enum": Impact.values()},
                    "description": {"type": "string"},
                    "helpUrl": {"type": "string"},
                    "nodes": {
                        "type": "array",
                        "items": {
                            "type": "object",
                            "properties": {
                                "impact": {"type": "string", "enum": Impact.values()},
                                "target": {"type": "array", "items": {"type": "string"}},
                                "failureSummary": {"type": "string"},
                                "html": {"type": "string"},
                            },
                            "required": ["impact", "target"],
                        },
                    },
                },
                "required": ["id", "impact", "description"],
            },
            "description": "Array of accessibility violations from Axe results",
        },
        "format": {
            "type": "string",
            "enum": ReportFormat.values(),
            "default": ReportFormat.DEFAULT.value,
            "description": "Output format for the summary",
        },
    },
    "required": ["violations"],
}

SUMMARIZE_VIOLATIONS_TOOL: dict[str, Any] = {
    "name": "summarize-violations",
    "description": "Summarizes accessibility violations from Axe results.",
    "input_schema": _VIOLATIONS_INPUT_SCHEMA,
}

WRITE_VIOLATIONS_REPORT_TOOL: dict[str, Any] = {
    "name": "write-violations-report",
    "description": (
        "Write accessibility violations report from Axe results. "
        "The summary is returned and also saved under the configured output directory."
    ),
    "input_schema": _VIOLATIONS_INPUT_SCHEMA,
}
