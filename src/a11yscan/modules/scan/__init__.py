"""Browser-driven accessibility scanning."""

from .batch import BatchCoordinator
from .engine import AccessibilityEngine, AxeEngine, parse_axe_response
from .executor import ScanExecutor, normalize_violations
from .models import (
    DEFAULT_RULE_TAGS,
    MAX_BATCH_URLS,
    BatchResult,
    EngineResult,
    HtmlTarget,
    Impact,
    RawFinding,
    RawNode,
    RuleSelection,
    ScanConfig,
    ScanOutcome,
    ScanSummary,
    ScanTarget,
    Standard,
    UrlTarget,
    Viewport,
    Violation,
    ViolationNode,
)
from .scanner import AccessibilityScanner
from .session import BrowserSession
from .validation import build_batch_configs, build_html_config, build_url_config

__all__ = [
    "AccessibilityEngine",
    "AccessibilityScanner",
    "AxeEngine",
    "BatchCoordinator",
    "BatchResult",
    "BrowserSession",
    "DEFAULT_RULE_TAGS",
    "EngineResult",
    "HtmlTarget",
    "Impact",
    "MAX_BATCH_URLS",
    "RawFinding",
    "RawNode",
    "RuleSelection",
    "ScanConfig",
    "ScanExecutor",
    "ScanOutcome",
    "ScanSummary",
    "ScanTarget",
    "Standard",
    "UrlTarget",
    "Viewport",
    "Violation",
    "ViolationNode",
    "build_batch_configs",
    "build_html_config",
    "build_url_config",
    "normalize_violations",
    "parse_axe_response",
]
