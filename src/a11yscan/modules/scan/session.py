"""Scoped ownership of one browser process and its per-target contexts."""

import logging
from collections.abc import AsyncIterator, Callable
from contextlib import asynccontextmanager
from typing import Any

from playwright.async_api import Page, async_playwright

from a11yscan.config import RuntimeSettings
from a11yscan.errors import BrowserError

from .models import Viewport

logger = logging.getLogger(__name__)


class BrowserSession:
    """Launches one browser and hands out isolated contexts one at a time.

    Use as ``async with BrowserSession(settings) as session``; the browser
    process is closed on every exit path. Each ``new_context`` block gets fresh
    cookies, storage and navigation state, and is closed before the next one
    may open.
    """

    def __init__(
        self,
        settings: RuntimeSettings,
        playwright_factory: Callable[[], Any] = async_playwright,
    ):
        self.settings = settings
        self._playwright_factory = playwright_factory
        self._playwright: Any = None
        self._browser: Any = None
        self._context_open = False

    async def __aenter__(self) -> "BrowserSession":
        await self.acquire()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.release()

    @property
    def is_acquired(self) -> bool:
        return self._browser is not None

    async def acquire(self) -> None:
        """Start Playwright and launch the configured browser."""
        if self._browser is not None:
            raise BrowserError("Browser session is already acquired")
        browser_name = self.settings.browser_type.value
        try:
            self._playwright = await self._playwright_factory().start()
            launcher = getattr(self._playwright, browser_name)
            self._browser = await launcher.launch(headless=self.settings.headless)
        except Exception as exc:
            await self.release()
            raise BrowserError(f"Failed to launch {browser_name}: {exc}") from exc
        logger.debug("Launched %s (headless=%s)", browser_name, self.settings.headless)

    async def release(self) -> None:
        """Close the browser and stop Playwright; safe to call more than once."""
        browser, self._browser = self._browser, None
        playwright, self._playwright = self._playwright, None
        if browser is not None:
            try:
                await browser.close()
            except Exception as exc:
                logger.warning("Failed to close browser: %s", exc)
        if playwright is not None:
            try:
                await playwright.stop()
            except Exception as exc:
                logger.warning("Failed to stop Playwright: %s", exc)

    @asynccontextmanager
    async def new_context(self, viewport: Viewport) -> AsyncIterator[Page]:
        """Open an isolated context with ``viewport`` and yield its page."""
        if self._browser is None:
            raise BrowserError("Browser session is not acquired")
        if self._context_open:
            raise BrowserError("Another browser context is still open")

        try:
            context = await self._browser.new_context(viewport=viewport.to_dict())
        except Exception as exc:
            raise BrowserError(f"Failed to open browser context: {exc}") from exc

        self._context_open = True
        try:
            try:
                page = await context.new_page()
            except Exception as exc:
                raise BrowserError(f"Failed to open page: {exc}") from exc
            yield page
        finally:
            self._context_open = False
            try:
                await context.close()
            except Exception as exc:
                logger.warning("Failed to close browser context: %s", exc)
