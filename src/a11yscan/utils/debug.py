"""Opt-in tracing of tool dispatch on stderr.

Enabled by the CLI ``--debug`` flag. Traces are rich-formatted and never
touch stdout, which carries tool payloads.
"""

import json
import threading
from typing import Any

from rich.console import Console
from rich.syntax import Syntax

_state = threading.local()
_console = Console(stderr=True)

MAX_INLINE_CHARS = 80
MAX_INLINE_ITEMS = 5


def set_debug_enabled(enabled: bool) -> None:
    _state.enabled = enabled


def is_debug_enabled() -> bool:
    return getattr(_state, "enabled", False)


def _condense(value: Any) -> Any:
    """Shorten long strings (HTML bodies) and long lists (batch URLs) for display."""
    if isinstance(value, str) and len(value) > MAX_INLINE_CHARS:
        return f"{value[:MAX_INLINE_CHARS]}... ({len(value)} chars)"
    if isinstance(value, list) and len(value) > MAX_INLINE_ITEMS:
        return [*value[:MAX_INLINE_ITEMS], f"... {len(value) - MAX_INLINE_ITEMS} more"]
    if isinstance(value, dict):
        return {key: _condense(item) for key, item in value.items()}
    return value


def debug_print(category: str, message: str, **data: Any) -> None:
    """Print a trace line plus ``data`` fields; no-op unless debugging."""
    if not is_debug_enabled():
        return
    _console.print(f"[DEBUG:{category}] {message}", style="bold cyan", markup=False)
    for key, value in data.items():
        if value is None:
            continue
        if isinstance(value, dict):
            _console.print(f"  {key}:", style="dim", markup=False)
            _console.print(Syntax(json.dumps(value, indent=2, default=str), "json"))
        else:
            _console.print(f"  {key}: {value}", style="dim", markup=False)


def debug_tool_execution(
    tool_name: str,
    params: dict[str, Any],
    start: bool = True,
    elapsed: float | None = None,
    result_size: int | None = None,
    is_error: bool = False,
) -> None:
    """Trace the start or the end of one ``dispatch_tool`` call."""
    if start:
        debug_print("tool", f"{tool_name} started", Params=_condense(params))
        return
    status = "failed" if is_error else "completed"
    timing = f" in {elapsed:.2f}s" if elapsed is not None else ""
    debug_print(
        "tool",
        f"{tool_name} {status}{timing}",
        Result=f"{result_size} chars" if result_size is not None else None,
    )
