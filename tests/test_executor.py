"""Tests for single-target scan execution and result normalization."""

import pytest
from playwright.async_api import Error as PlaywrightError
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from a11yscan.config import RuntimeSettings
from a11yscan.errors import BrowserError, EngineError, NavigationTimeoutError
from a11yscan.modules.scan import (
    AccessibilityScanner,
    EngineResult,
    RawFinding,
    ScanSummary,
    build_html_config,
    build_url_config,
    normalize_violations,
)

URL = "https://example.com"


@pytest.mark.asyncio
async def test_url_scan_navigates_waits_and_analyzes(scanner, fake_playwright, fake_engine):
    config = build_url_config({"url": URL, "waitForPageLoad": 1200})
    await scanner.scan(config)

    page = fake_playwright.browser.pages[0]
    assert page.calls[0] == ("goto", URL, "networkidle", 30000)
    assert ("wait_for_timeout", 1200) in page.calls
    assert fake_engine.calls == [(URL, config.rules)]
    assert fake_playwright.browser.contexts[0].closed
    assert fake_playwright.browser.closed


@pytest.mark.asyncio
async def test_html_scan_injects_content(scanner, fake_playwright, fake_engine):
    html = "<main><img src='x'></main>"
    await scanner.scan(build_html_config({"html": html}))

    page = fake_playwright.browser.pages[0]
    assert page.calls[0][:3] == ("set_content", html, "networkidle")
    assert ("wait_for_timeout", 2000) in page.calls
    assert fake_engine.calls[0][0] == html


@pytest.mark.asyncio
async def test_navigation_timeout_uses_configured_bound(fake_playwright, fake_engine, settings):
    runtime = RuntimeSettings(output_directory=settings.output_directory, navigation_timeout_ms=900)
    scanner = AccessibilityScanner(
        runtime, engine=fake_engine, playwright_factory=lambda: fake_playwright
    )
    await scanner.scan(build_url_config({"url": URL}))
    assert fake_playwright.browser.pages[0].calls[0][3] == 900


@pytest.mark.asyncio
async def test_max_results_bounds_list_not_summary(scanner, fake_engine, make_engine_result):
    fake_engine.default = make_engine_result(count=8, passes=12, incomplete=2)
    outcome = await scanner.scan(build_url_config({"url": URL, "maxResults": 3}))

    assert len(outcome.violations) == 3
    assert outcome.summary.violations_count == 8
    assert outcome.summary.passes_count == 12
    assert outcome.summary.incomplete_count == 2
    assert [violation.id for violation in outcome.violations] == ["rule-0", "rule-1", "rule-2"]


@pytest.mark.asyncio
async def test_html_snippets_stripped_by_default(scanner, fake_engine, make_engine_result):
    fake_engine.default = make_engine_result(count=1, nodes=2)
    outcome = await scanner.scan(build_url_config({"url": URL}))

    nodes = outcome.to_dict()["violations"][0]["nodes"]
    assert len(nodes) == 2
    assert all("html" not in node for node in nodes)
    assert nodes[0]["target"] == ["#node-0"]
    assert nodes[0]["failureSummary"] == "Fix any of the following"


@pytest.mark.asyncio
async def test_html_snippets_kept_when_requested(scanner, fake_engine, make_engine_result):
    fake_engine.default = make_engine_result(count=1)
    outcome = await scanner.scan(build_url_config({"url": URL, "includeHtml": True}))
    assert outcome.to_dict()["violations"][0]["nodes"][0]["html"] == '<img src="x">'


@pytest.mark.asyncio
async def test_timeout_maps_to_navigation_timeout(scanner, fake_playwright, fake_engine):
    fake_playwright.load_errors[URL] = PlaywrightTimeoutError("Timeout 30000ms exceeded")
    with pytest.raises(NavigationTimeoutError) as exc_info:
        await scanner.scan(build_url_config({"url": URL}))
    assert URL in str(exc_info.value)
    assert fake_engine.calls == []
    assert fake_playwright.browser.contexts[0].closed
    assert fake_playwright.browser.closed


@pytest.mark.asyncio
async def test_load_error_maps_to_browser_error(scanner, fake_playwright):
    fake_playwright.load_errors[URL] = PlaywrightError("net::ERR_NAME_NOT_RESOLVED")
    with pytest.raises(BrowserError) as exc_info:
        await scanner.scan(build_url_config({"url": URL}))
    assert not isinstance(exc_info.value, NavigationTimeoutError)
    assert "ERR_NAME_NOT_RESOLVED" in str(exc_info.value)


@pytest.mark.asyncio
async def test_engine_error_propagates_and_releases(scanner, fake_playwright, fake_engine):
    fake_engine.errors[URL] = EngineError("axe-core reported an error: bad")
    with pytest.raises(EngineError):
        await scanner.scan(build_url_config({"url": URL}))
    assert fake_playwright.browser.contexts[0].closed
    assert fake_playwright.stops == 1


def test_normalize_caps_nodes_per_violation(make_axe_violation) -> None:
    findings = [RawFinding.from_axe(make_axe_violation(nodes=10))]
    config = build_url_config({"url": URL, "maxResults": 4})
    violations = normalize_violations(findings, config)
    assert len(violations[0].nodes) == 4


def test_normalize_keeps_engine_order(make_axe_violation) -> None:
    findings = [
        RawFinding.from_axe(make_axe_violation("b-rule", impact="minor")),
        RawFinding.from_axe(make_axe_violation("a-rule", impact="critical")),
    ]
    violations = normalize_violations(findings, build_url_config({"url": URL}))
    assert [violation.id for violation in violations] == ["b-rule", "a-rule"]


def test_summary_timestamp_is_utc_iso() -> None:
    summary = ScanSummary.from_engine(EngineResult(violations=[], passes_count=1, incomplete_count=0))
    assert summary.timestamp.endswith("Z")
    assert summary.to_dict()["passesCount"] == 1
