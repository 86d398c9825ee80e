"""Execute tool calls requested by a host.

Each ``execute_*`` coroutine takes the tool-call ``params`` dict and a
``ToolContext`` and returns a ``ToolResponse``. Failures come back as
error-flagged responses rather than exceptions.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Awaitable, Callable
from typing import Any

from a11yscan.utils.debug import debug_tool_execution, is_debug_enabled

from .context import ToolContext, ToolResponse
from .report_executors import execute_summarize_violations, execute_write_violations_report
from .scan_executors import execute_scan_batch, execute_scan_html, execute_scan_url

__all__ = [
    "TOOL_EXECUTORS",
    "ToolContext",
    "ToolResponse",
    "dispatch_tool",
    "execute_scan_batch",
    "execute_scan_html",
    "execute_scan_url",
    "execute_summarize_violations",
    "execute_write_violations_report",
]

logger = logging.getLogger(__name__)

Executor = Callable[[dict[str, Any], ToolContext], Awaitable[ToolResponse]]

TOOL_EXECUTORS: dict[str, Executor] = {
    "scan-url": execute_scan_url,
    "scan-html": execute_scan_html,
    "scan-batch": execute_scan_batch,
    "summarize-violations": execute_summarize_violations,
    "write-violations-report": execute_write_violations_report,
}


async def dispatch_tool(name: str, params: dict[str, Any], context: ToolContext) -> ToolResponse:
    """Run the named tool and return its response.

    Unknown tool names and unexpected executor failures are returned as error
    responses (not raised) so the host can report them.
    """
    if is_debug_enabled():
        debug_tool_execution(tool_name=name, params=params, start=True)

    start_time = time.time()
    executor = TOOL_EXECUTORS.get(name)
    if executor is None:
        response = ToolResponse.error(f"Unknown tool: {name}")
    elif not isinstance(params, dict):
        response = ToolResponse.error(f"Tool '{name}' failed: parameters must be an object")
    else:
        try:
            response = await executor(params, context)
        except Exception as exc:
            logger.exception("Tool %s failed", name)
            response = ToolResponse.error(f"Tool '{name}' failed: {exc}")

    if is_debug_enabled():
        debug_tool_execution(
            tool_name=name,
            params=params if isinstance(params, dict) else {},
            start=False,
            elapsed=time.time() - start_time,
            result_size=len(response.text),
            is_error=response.is_error,
        )

    return response
