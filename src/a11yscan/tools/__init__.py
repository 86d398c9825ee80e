"""Named, independently invocable accessibility tools."""

from .definitions import get_all_tools
from .executors import TOOL_EXECUTORS, ToolContext, ToolResponse, dispatch_tool

__all__ = [
    "TOOL_EXECUTORS",
    "ToolContext",
    "ToolResponse",
    "dispatch_tool",
    "get_all_tools",
]
