"""Report data models."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any

from a11yscan.modules.scan.models import IMPACT_ORDER, Impact


class ReportFormat(str, Enum):
    """Closed set of summary renderings."""

    DEFAULT = "default"
    SIMPLE = "simple"
    DETAILED = "detailed"
    MARKDOWN = "markdown"
    HTML = "html"
    CSV = "csv"

    @property
    def extension(self) -> str:
        return _EXTENSIONS[self]

    @classmethod
    def values(cls) -> list[str]:
        return [member.value for member in cls]


_EXTENSIONS = {
    ReportFormat.DEFAULT: "json",
    ReportFormat.SIMPLE: "txt",
    ReportFormat.DETAILED: "json",
    ReportFormat.MARKDOWN: "md",
    ReportFormat.HTML: "html",
    ReportFormat.CSV: "csv",
}


@dataclass(frozen=True)
class ImpactTally:
    """Violation counts per impact level; absent levels count as zero."""

    counts: dict[str, int] = field(default_factory=dict)

    def count(self, impact: Impact | str) -> int:
        key = impact.value if isinstance(impact, Impact) else impact
        return self.counts.get(key, 0)

    def to_dict(self) -> dict[str, int]:
        """Non-zero levels only, most severe first."""
        return {
            level.value: self.counts[level.value]
            for level in reversed(IMPACT_ORDER)
            if self.counts.get(level.value)
        }


@dataclass(frozen=True)
class SummaryEntry:
    """Condensed view of one violation."""

    id: str
    description: str
    impact: str | None
    help_url: str | None
    nodes_affected: int

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "id": self.id,
            "description": self.description,
            "impact": self.impact,
        }
        if self.help_url is not None:
            data["helpUrl"] = self.help_url
        data["nodesAffected"] = self.nodes_affected
        return data


@dataclass(frozen=True)
class ViolationSummary:
    """Aggregate of a violation list."""

    total_violations: int
    by_impact: ImpactTally
    entries: list[SummaryEntry]

    def to_dict(self) -> dict[str, Any]:
        return {
            "totalViolations": self.total_violations,
            "byImpact": self.by_impact.to_dict(),
            "violations": [entry.to_dict() for entry in self.entries],
        }


@dataclass(frozen=True)
class ExportRecord:
    """A rendered summary persisted to disk."""

    path: Path
    format: ReportFormat
    summary: ViolationSummary
    content: str
