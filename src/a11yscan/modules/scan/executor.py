"""Drive one target through a browser context and the rule engine."""

import logging
import time

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Page
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from a11yscan.config.settings import DEFAULT_NAVIGATION_TIMEOUT_MS
from a11yscan.errors import BrowserError, NavigationTimeoutError

from .engine import AccessibilityEngine
from .models import (
    RawFinding,
    ScanConfig,
    ScanOutcome,
    ScanSummary,
    ScanTarget,
    UrlTarget,
    Violation,
    ViolationNode,
)
from .session import BrowserSession

logger = logging.getLogger(__name__)


class ScanExecutor:
    """Load a target, let it settle, analyze it, and normalize the findings.

    Errors propagate to the caller unchanged; there is no retry or partial
    recovery here.
    """

    def __init__(
        self,
        engine: AccessibilityEngine,
        navigation_timeout_ms: int = DEFAULT_NAVIGATION_TIMEOUT_MS,
    ):
        self.engine = engine
        self.navigation_timeout_ms = navigation_timeout_ms

    async def execute(self, session: BrowserSession, config: ScanConfig) -> ScanOutcome:
        label = config.target.label
        started = time.perf_counter()
        logger.info("Performing accessibility scan: %s", label)

        async with session.new_context(config.viewport) as page:
            await self._load(page, config)
            result = await self.engine.analyze(page, config.rules)

        outcome = ScanOutcome(
            summary=ScanSummary.from_engine(result),
            violations=normalize_violations(result.violations, config),
        )
        logger.info(
            "Scan completed for %s: %d violations (%d returned) in %.1fs",
            label,
            outcome.summary.violations_count,
            len(outcome.violations),
            time.perf_counter() - started,
        )
        return outcome

    async def _load(self, page: Page, config: ScanConfig) -> None:
        target = config.target
        timeout = self.navigation_timeout_ms
        try:
            if isinstance(target, UrlTarget):
                await page.goto(target.url, wait_until="networkidle", timeout=timeout)
            else:
                await page.set_content(target.html, wait_until="networkidle", timeout=timeout)
            # fixed settle delay for client-side rendering
            await page.wait_for_timeout(config.wait_after_load_ms)
            await page.wait_for_load_state("load", timeout=timeout)
        except PlaywrightTimeoutError as exc:
            raise NavigationTimeoutError(
                f"Timed out after {timeout} ms loading {_describe(target)}"
            ) from exc
        except PlaywrightError as exc:
            raise BrowserError(f"Failed to load {_describe(target)}: {exc}") from exc


def _describe(target: ScanTarget) -> str:
    if isinstance(target, UrlTarget):
        return target.url
    return f"HTML content ({target.label})"


def normalize_violations(findings: list[RawFinding], config: ScanConfig) -> list[Violation]:
    """Cap violations and their nodes at ``max_results`` and drop HTML unless requested."""
    limit = config.max_results
    return [
        Violation(
            id=finding.id,
            impact=finding.impact,
            description=finding.description,
            help_url=finding.help_url,
            nodes=[
                ViolationNode(
                    impact=node.impact,
                    target=list(node.target),
                    failure_summary=node.failure_summary,
                    html=node.html if config.include_html_snippets else None,
                )
                for node in finding.nodes[:limit]
            ],
        )
        for finding in findings[:limit]
    ]
