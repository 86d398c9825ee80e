"""Data models for scan targets, configuration and normalized results."""

import uuid
from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import Enum
from typing import Any


class Impact(str, Enum):
    """Ordinal severity of a violation or node, lowest first."""

    MINOR = "minor"
    MODERATE = "moderate"
    SERIOUS = "serious"
    CRITICAL = "critical"

    @classmethod
    def values(cls) -> list[str]:
        return [member.value for member in cls]


IMPACT_ORDER = [Impact.MINOR, Impact.MODERATE, Impact.SERIOUS, Impact.CRITICAL]


class Standard(str, Enum):
    """Single rule-tag standards a caller may select."""

    WCAG2A = "wcag2a"
    WCAG2AA = "wcag2aa"
    WCAG2AAA = "wcag2aaa"
    WCAG21A = "wcag21a"
    WCAG21AA = "wcag21aa"
    WCAG22AA = "wcag22aa"
    BEST_PRACTICE = "best-practice"
    EXPERIMENTAL = "experimental"

    @classmethod
    def values(cls) -> list[str]:
        return [member.value for member in cls]


DEFAULT_RULE_TAGS = (Standard.WCAG2A.value, Standard.WCAG2AA.value, Standard.WCAG21AA.value)

DEFAULT_VIEWPORT_WIDTH = 1280
DEFAULT_VIEWPORT_HEIGHT = 720
DEFAULT_URL_WAIT_MS = 5000
DEFAULT_HTML_WAIT_MS = 2000
DEFAULT_MAX_RESULTS = 50
MAX_BATCH_URLS = 20


@dataclass(frozen=True)
class Viewport:
    """Browser viewport dimensions in CSS pixels."""

    width: int = DEFAULT_VIEWPORT_WIDTH
    height: int = DEFAULT_VIEWPORT_HEIGHT

    def to_dict(self) -> dict[str, int]:
        return {"width": self.width, "height": self.height}


@dataclass(frozen=True)
class UrlTarget:
    """A page reached by navigating to an absolute http(s) URL."""

    url: str

    @property
    def label(self) -> str:
        return self.url


@dataclass(frozen=True)
class HtmlTarget:
    """Raw markup injected into a blank page.

    The markup is never used as an identifier; logs and batch entries refer to
    the synthetic ``scan_id`` instead.
    """

    html: str
    scan_id: str = field(default_factory=lambda: f"html-{uuid.uuid4().hex[:12]}")

    @property
    def label(self) -> str:
        return self.scan_id


ScanTarget = UrlTarget | HtmlTarget


@dataclass(frozen=True)
class RuleSelection:
    """Which rules the engine evaluates.

    ``standard`` replaces the default tag set when given. ``rule_overrides``
    enables or disables individual rule ids and applies regardless of the tag
    selection.
    """

    standard: Standard | None = None
    rule_overrides: dict[str, bool] = field(default_factory=dict)

    @property
    def tags(self) -> list[str]:
        if self.standard is not None:
            return [self.standard.value]
        return list(DEFAULT_RULE_TAGS)

    def to_axe_options(self) -> dict[str, Any]:
        """Build the options object passed to ``axe.run``."""
        options: dict[str, Any] = {"runOnly": {"type": "tag", "values": self.tags}}
        if self.rule_overrides:
            options["rules"] = {
                rule_id: {"enabled": enabled} for rule_id, enabled in self.rule_overrides.items()
            }
        return options


@dataclass(frozen=True)
class ScanConfig:
    """Validated parameters for scanning one target."""

    target: ScanTarget
    viewport: Viewport = field(default_factory=Viewport)
    wait_after_load_ms: int = DEFAULT_URL_WAIT_MS
    rules: RuleSelection = field(default_factory=RuleSelection)
    include_html_snippets: bool = False
    max_results: int = DEFAULT_MAX_RESULTS


@dataclass(frozen=True)
class RawNode:
    """One affected DOM node as reported by the engine."""

    impact: str | None
    target: list[str]
    failure_summary: str | None = None
    html: str | None = None

    @classmethod
    def from_axe(cls, data: dict[str, Any]) -> "RawNode":
        return cls(
            impact=data.get("impact"),
            target=[str(selector) for selector in data.get("target") or []],
            failure_summary=data.get("failureSummary"),
            html=data.get("html"),
        )


@dataclass(frozen=True)
class RawFinding:
    """One rule failure as reported by the engine, before normalization."""

    id: str
    impact: str | None
    description: str
    help_url: str | None
    nodes: list[RawNode] = field(default_factory=list)

    @classmethod
    def from_axe(cls, data: dict[str, Any]) -> "RawFinding":
        return cls(
            id=str(data.get("id", "unknown")),
            impact=data.get("impact"),
            description=data.get("description", ""),
            help_url=data.get("helpUrl"),
            nodes=[RawNode.from_axe(node) for node in data.get("nodes") or []],
        )


@dataclass(frozen=True)
class EngineResult:
    """Complete output of one engine run."""

    violations: list[RawFinding]
    passes_count: int
    incomplete_count: int


@dataclass(frozen=True)
class ViolationNode:
    """Normalized affected node."""

    impact: str | None
    target: list[str]
    failure_summary: str | None = None
    html: str | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "impact": self.impact,
            "target": list(self.target),
            "failureSummary": self.failure_summary,
        }
        if self.html is not None:
            data["html"] = self.html
        return data


@dataclass(frozen=True)
class Violation:
    """Normalized rule failure returned to callers."""

    id: str
    impact: str | None
    description: str
    help_url: str | None
    nodes: list[ViolationNode] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "impact": self.impact,
            "description": self.description,
            "helpUrl": self.help_url,
            "nodes": [node.to_dict() for node in self.nodes],
        }


@dataclass(frozen=True)
class ScanSummary:
    """Totals from the full engine run, independent of result truncation."""

    timestamp: str
    violations_count: int
    passes_count: int
    incomplete_count: int

    @classmethod
    def from_engine(cls, result: EngineResult) -> "ScanSummary":
        return cls(
            timestamp=datetime.now(UTC).isoformat().replace("+00:00", "Z"),
            violations_count=len(result.violations),
            passes_count=result.passes_count,
            incomplete_count=result.incomplete_count,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "timestamp": self.timestamp,
            "violationsCount": self.violations_count,
            "passesCount": self.passes_count,
            "incompleteCount": self.incomplete_count,
        }


@dataclass(frozen=True)
class ScanOutcome:
    """Summary plus the (possibly truncated) violation list for one target."""

    summary: ScanSummary
    violations: list[Violation]

    def to_dict(self) -> dict[str, Any]:
        return {
            "summary": self.summary.to_dict(),
            "violations": [violation.to_dict() for violation in self.violations],
        }


@dataclass(frozen=True)
class BatchResult:
    """Outcome of one batch entry: either a scan outcome or an error message."""

    target: str
    success: bool
    outcome: ScanOutcome | None = None
    error: str | None = None

    @classmethod
    def succeeded(cls, target: str, outcome: ScanOutcome) -> "BatchResult":
        return cls(target=target, success=True, outcome=outcome)

    @classmethod
    def failed(cls, target: str, error: str) -> "BatchResult":
        return cls(target=target, success=False, error=error)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"target": self.target, "success": self.success}
        if self.outcome is not None:
            data.update(self.outcome.to_dict())
        else:
            data["error"] = self.error
        return data
