"""Executors for scan tools (URL, raw HTML, batch)."""

from __future__ import annotations

import logging
from typing import Any

from a11yscan.modules.scan import build_batch_configs, build_html_config, build_url_config

from .context import ToolContext, ToolResponse

logger = logging.getLogger(__name__)


async def execute_scan_url(params: dict[str, Any], context: ToolContext) -> ToolResponse:
    """Scan one URL and return ``{summary, violations}``."""
    try:
        config = build_url_config(params)
        logger.info("Starting accessibility scan for URL: %s", config.target.label)
        outcome = await context.scanner().scan(config)
    except Exception as exc:
        logger.error("URL scanning error: %s", exc)
        return ToolResponse.error(f"Error scanning URL: {exc}")
    return ToolResponse.json(outcome.to_dict())


async def execute_scan_html(params: dict[str, Any], context: ToolContext) -> ToolResponse:
    """Scan raw HTML content and return ``{summary, violations}``."""
    try:
        config = build_html_config(params)
        logger.info("Starting accessibility scan for raw HTML content (%s)", config.target.label)
        outcome = await context.scanner().scan(config)
    except Exception as exc:
        logger.error("HTML scanning error: %s", exc)
        return ToolResponse.error(f"Error scanning HTML content: {exc}")
    return ToolResponse.json(outcome.to_dict())


async def execute_scan_batch(params: dict[str, Any], context: ToolContext) -> ToolResponse:
    """Scan up to 20 URLs sequentially; per-URL failures stay in their entries."""
    try:
        configs = build_batch_configs(params)
        results = await context.scanner().scan_batch(configs, progress=logger.debug)
    except Exception as exc:
        logger.error("Batch scanning error: %s", exc)
        return ToolResponse.error(f"Error during batch scan: {exc}")
    return ToolResponse.json([result.to_dict() for result in results])
