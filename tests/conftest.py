"""Test configuration and fixtures for a11yscan."""

import tempfile
from collections.abc import Callable, Generator
from pathlib import Path
from typing import Any

import pytest

from a11yscan.config import RuntimeSettings
from a11yscan.modules.scan import AccessibilityEngine, AccessibilityScanner, EngineResult
from a11yscan.modules.scan.models import RawFinding, RuleSelection
from a11yscan.tools import ToolContext


class FakePage:
    """Records navigation calls; ``loaded`` is the URL or HTML last loaded."""

    def __init__(self, browser: "FakeBrowser"):
        self.browser = browser
        self.calls: list[tuple[Any, ...]] = []
        self.loaded: str | None = None

    async def goto(self, url: str, wait_until: str | None = None, timeout: float | None = None):
        self.calls.append(("goto", url, wait_until, timeout))
        self.browser.events.append(f"goto {url}")
        error = self.browser.load_errors.get(url)
        if error is not None:
            raise error
        self.loaded = url

    async def set_content(
        self, html: str, wait_until: str | None = None, timeout: float | None = None
    ):
        self.calls.append(("set_content", html, wait_until, timeout))
        self.browser.events.append("set_content")
        error = self.browser.load_errors.get(html)
        if error is not None:
            raise error
        self.loaded = html

    async def wait_for_timeout(self, timeout: float) -> None:
        self.calls.append(("wait_for_timeout", timeout))

    async def wait_for_load_state(self, state: str = "load", timeout: float | None = None):
        self.calls.append(("wait_for_load_state", state, timeout))


class FakeContext:
    def __init__(self, browser: "FakeBrowser", viewport: dict[str, int] | None):
        self.browser = browser
        self.viewport = viewport
        self.closed = False

    async def new_page(self) -> FakePage:
        page = FakePage(self.browser)
        self.browser.pages.append(page)
        return page

    async def close(self) -> None:
        self.closed = True
        self.browser.open_contexts -= 1
        self.browser.events.append("close-context")


class FakeBrowser:
    """Tracks context lifecycle so tests can check isolation and ordering."""

    def __init__(self):
        self.contexts: list[FakeContext] = []
        self.pages: list[FakePage] = []
        self.events: list[str] = []
        self.load_errors: dict[str, Exception] = {}
        self.open_contexts = 0
        self.max_open_contexts = 0
        self.closed = False

    async def new_context(self, viewport: dict[str, int] | None = None) -> FakeContext:
        context = FakeContext(self, viewport)
        self.contexts.append(context)
        self.open_contexts += 1
        self.max_open_contexts = max(self.max_open_contexts, self.open_contexts)
        self.events.append("new-context")
        return context

    async def close(self) -> None:
        self.closed = True
        self.events.append("close-browser")


class FakeBrowserType:
    def __init__(self, playwright: "FakePlaywright", name: str):
        self._playwright = playwright
        self.name = name

    async def launch(self, headless: bool = True) -> FakeBrowser:
        self._playwright.launches.append((self.name, headless))
        if self._playwright.launch_error is not None:
            raise self._playwright.launch_error
        self._playwright.browser = FakeBrowser()
        self._playwright.browser.load_errors = self._playwright.load_errors
        return self._playwright.browser


class FakePlaywright:
    """Stand-in for the object returned by ``async_playwright().start()``."""

    def __init__(self):
        self.launches: list[tuple[str, bool]] = []
        self.launch_error: Exception | None = None
        self.load_errors: dict[str, Exception] = {}
        self.browser: FakeBrowser | None = None
        self.starts = 0
        self.stops = 0
        self.chromium = FakeBrowserType(self, "chromium")
        self.firefox = FakeBrowserType(self, "firefox")
        self.webkit = FakeBrowserType(self, "webkit")

    async def start(self) -> "FakePlaywright":
        self.starts += 1
        return self

    async def stop(self) -> None:
        self.stops += 1


class FakeEngine(AccessibilityEngine):
    """Returns canned results keyed by the URL or HTML loaded into the page."""

    name = "fake"

    def __init__(self):
        self.results: dict[str, EngineResult] = {}
        self.errors: dict[str, Exception] = {}
        self.default = EngineResult(violations=[], passes_count=0, incomplete_count=0)
        self.calls: list[tuple[str | None, RuleSelection]] = []

    async def analyze(self, page: FakePage, rules: RuleSelection) -> EngineResult:
        self.calls.append((page.loaded, rules))
        error = self.errors.get(page.loaded)
        if error is not None:
            raise error
        return self.results.get(page.loaded, self.default)


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def settings(temp_dir: Path) -> RuntimeSettings:
    """Runtime settings writing reports under the temp directory."""
    return RuntimeSettings(output_directory=temp_dir / "output")


@pytest.fixture
def fake_playwright() -> FakePlaywright:
    return FakePlaywright()


@pytest.fixture
def fake_engine() -> FakeEngine:
    return FakeEngine()


@pytest.fixture
def scanner_factory(
    fake_playwright: FakePlaywright, fake_engine: FakeEngine
) -> Callable[[RuntimeSettings], AccessibilityScanner]:
    """Build scanners wired to the fake browser stack and engine."""

    def factory(runtime_settings: RuntimeSettings) -> AccessibilityScanner:
        return AccessibilityScanner(
            runtime_settings,
            engine=fake_engine,
            playwright_factory=lambda: fake_playwright,
        )

    return factory


@pytest.fixture
def scanner(scanner_factory, settings: RuntimeSettings) -> AccessibilityScanner:
    return scanner_factory(settings)


@pytest.fixture
def tool_context(scanner_factory, settings: RuntimeSettings) -> ToolContext:
    return ToolContext(settings=settings, scanner_factory=scanner_factory)


@pytest.fixture
def make_axe_violation() -> Callable[..., dict[str, Any]]:
    """Factory for violation objects shaped like axe-core output."""

    def factory(
        rule_id: str = "image-alt",
        impact: str = "critical",
        nodes: int = 1,
        html: str = '<img src="x">',
    ) -> dict[str, Any]:
        return {
            "id": rule_id,
            "impact": impact,
            "description": f"Checks {rule_id}",
            "help": f"Fix {rule_id}",
            "helpUrl": f"https://dequeuniversity.com/rules/axe/4.8/{rule_id}",
            "tags": ["wcag2a"],
            "nodes": [
                {
                    "impact": impact,
                    "target": [f"#node-{index}"],
                    "failureSummary": "Fix any of the following",
                    "html": html,
                }
                for index in range(nodes)
            ],
        }

    return factory


@pytest.fixture
def make_engine_result(make_axe_violation) -> Callable[..., EngineResult]:
    """Factory for EngineResult objects with ``count`` distinct violations."""

    def factory(count: int = 1, nodes: int = 1, passes: int = 0, incomplete: int = 0):
        return EngineResult(
            violations=[
                RawFinding.from_axe(make_axe_violation(f"rule-{index}", nodes=nodes))
                for index in range(count)
            ],
            passes_count=passes,
            incomplete_count=incomplete,
        )

    return factory


@pytest.fixture
def sample_violations() -> list[dict[str, Any]]:
    """Caller-supplied violations: two serious, one critical."""
    return [
        {
            "id": "color-contrast",
            "impact": "serious",
            "description": "Ensures contrast is sufficient",
            "helpUrl": "https://dequeuniversity.com/rules/axe/4.8/color-contrast",
            "nodes": [
                {"impact": "serious", "target": ["#a"], "failureSummary": "Low contrast"},
                {"impact": "serious", "target": ["#b"], "failureSummary": "Low contrast"},
            ],
        },
        {
            "id": "link-name",
            "impact": "serious",
            "description": "Ensures links have discernible text",
            "helpUrl": "https://dequeuniversity.com/rules/axe/4.8/link-name",
            "nodes": [{"impact": "serious", "target": ["a.nav"], "failureSummary": "No text"}],
        },
        {
            "id": "image-alt",
            "impact": "critical",
            "description": "Ensures images have alternate text",
            "nodes": [{"impact": "critical", "target": ["img"], "failureSummary": "No alt"}],
        },
    ]
