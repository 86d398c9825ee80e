"""Tool schemas for scanning operations (URL, raw HTML, batch)."""

from typing import Any

from a11yscan.modules.scan.models import (
    DEFAULT_HTML_WAIT_MS,
    DEFAULT_MAX_RESULTS,
    DEFAULT_URL_WAIT_MS,
    MAX_BATCH_URLS,
    Standard,
)


def _scan_options(default_wait_ms: int) -> dict[str, Any]:
    return {
        "waitForPageLoad": {
            "type": "integer",
            "exclusiveMinimum": 0,
            "default": default_wait_ms,
            "description": "Time in milliseconds to wait for the page to load before scanning",
        },
        "viewport": {
            "type": "object",
            "properties": {
                "width": {"type": "integer", "exclusiveMinimum": 0, "default": 1280},
                "height": {"type": "integer", "exclusiveMinimum": 0, "default": 720},
            },
            "description": "Browser viewport dimensions",
        },
        "axeOptions": {
            "type": "object",
            "properties": {
                "runOnly": {
                    "type": "string",
                    "enum": Standard.values(),
                    "description": "Standard to test against",
                },
                "rules": {
                    "type": "object",
                    "additionalProperties": {
                        "type": "object",
                        "properties": {"enabled": {"type": "boolean"}},
                        "required": ["enabled"],
                    },
                    "description": "Enable or disable specific rules",
                },
            },
            "description": "Configuration options for axe-core",
        },
        "includeHtml": {
            "type": "boolean",
            "default": False,
            "description": "Include HTML snippets in the violation reports",
        },
        "maxResults": {
            "type": "integer",
            "exclusiveMinimum": 0,
            "default": DEFAULT_MAX_RESULTS,
            "description": "Maximum number of violations to return",
        },
    }


SCAN_URL_TOOL: dict[str, Any] = {
    "name": "scan-url",
    "description": "Scans a URL for accessibility violations using Playwright and Axe.",
    "input_schema": {
        "type": "object",
        "properties": {
            "url": {
                "type": "string",
                "format": "uri",
                "description": "Must be a valid URL starting with http:// or https://",
            },
            **_scan_options(DEFAULT_URL_WAIT_MS),
        },
        "required": ["url"],
    },
}

SCAN_HTML_TOOL: dict[str, Any] = {
    "name": "scan-html",
    "description": "Scans raw HTML content for accessibility violations using Playwright and Axe.",
    "input_schema": {
        "type": "object",
        "properties": {
            "html": {
                "type": "string",
                "minLength": 1,
                "description": "Raw HTML content to be scanned",
            },
            **_scan_options(DEFAULT_HTML_WAIT_MS),
        },
        "required": ["html"],
    },
}

SCAN_BATCH_TOOL: dict[str, Any] = {
    "name": "scan-batch",
    "description": "Scans multiple URLs for accessibility violations using Playwright and Axe.",
    "input_schema": {
        "type": "object",
        "properties": {
            "urls": {
                "type": "array",
                "items": {"type": "string", "format": "uri"},
                "minItems": 1,
                "maxItems": MAX_BATCH_URLS,
                "description": "Array of URLs to scan",
            },
            **_scan_options(DEFAULT_URL_WAIT_MS),
        },
        "required": ["urls"],
    },
}
