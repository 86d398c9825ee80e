"""Entry points for single, HTML and batch accessibility scans."""

import logging
from collections.abc import Callable, Sequence
from typing import Any

from playwright.async_api import async_playwright

from a11yscan.config import RuntimeSettings

from .batch import BatchCoordinator
from .engine import AccessibilityEngine, AxeEngine
from .executor import ScanExecutor
from .models import BatchResult, ScanConfig, ScanOutcome
from .session import BrowserSession

logger = logging.getLogger(__name__)


class AccessibilityScanner:
    """Wire settings, browser sessions and the rule engine together."""

    def __init__(
        self,
        settings: RuntimeSettings,
        engine: AccessibilityEngine | None = None,
        playwright_factory: Callable[[], Any] = async_playwright,
    ):
        self.settings = settings
        self._playwright_factory = playwright_factory
        self.executor = ScanExecutor(
            engine or AxeEngine(),
            navigation_timeout_ms=settings.navigation_timeout_ms,
        )

    def session(self) -> BrowserSession:
        """Return a fresh, not yet acquired, browser session."""
        return BrowserSession(self.settings, playwright_factory=self._playwright_factory)

    async def scan(self, config: ScanConfig) -> ScanOutcome:
        """Scan one URL or HTML target in its own browser process."""
        async with self.session() as session:
            return await self.executor.execute(session, config)

    async def scan_batch(
        self,
        configs: Sequence[ScanConfig],
        progress: Callable[[str], None] | None = None,
    ) -> list[BatchResult]:
        """Scan several targets sequentially on one browser process."""
        logger.info("Starting batch accessibility scan for %d URLs", len(configs))
        results = await BatchCoordinator(self.executor, self.session).run(configs, progress)
        failed = sum(1 for result in results if not result.success)
        logger.info("Batch scan completed for %d URLs (%d failed)", len(results), failed)
        return results
