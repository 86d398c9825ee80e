"""Per-process state handed to every tool executor."""

import json
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from a11yscan.config import RuntimeSettings
from a11yscan.modules.scan import AccessibilityScanner


@dataclass(frozen=True)
class ToolResponse:
    """Result of one tool call: ordered text blocks plus an error flag."""

    content: list[str]
    is_error: bool = False

    @classmethod
    def json(cls, payload: Any, *extra: str) -> "ToolResponse":
        return cls(content=[json.dumps(payload, indent=2), *extra])

    @classmethod
    def error(cls, message: str, *extra: str) -> "ToolResponse":
        return cls(content=[message, *extra], is_error=True)

    @property
    def text(self) -> str:
        return "\n".join(self.content)

    def to_dict(self) -> dict[str, Any]:
        return {
            "content": [{"type": "text", "text": block} for block in self.content],
            "isError": self.is_error,
        }


@dataclass
class ToolContext:
    """Runtime settings plus the scanner factory used by scan tools."""

    settings: RuntimeSettings
    scanner_factory: Callable[[RuntimeSettings], AccessibilityScanner] = field(
        default=AccessibilityScanner
    )

    def scanner(self) -> AccessibilityScanner:
        return self.scanner_factory(self.settings)
