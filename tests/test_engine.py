"""Tests for the axe-core engine adapter."""

from types import SimpleNamespace

import pytest

from a11yscan.errors import EngineError
from a11yscan.modules.scan import AxeEngine, RuleSelection, Standard, parse_axe_response


class FakeAxe:
    """Mimics axe_playwright_python's Axe.run."""

    def __init__(self, response=None, error: Exception | None = None):
        self.response = response or {"violations": [], "passes": [], "incomplete": []}
        self.error = error
        self.calls: list[tuple[object, dict]] = []

    async def run(self, page, options=None):
        self.calls.append((page, options))
        if self.error is not None:
            raise self.error
        return SimpleNamespace(response=self.response)


class TestParseAxeResponse:
    """Tests for parse_axe_response."""

    def test_counts_and_findings(self, make_axe_violation) -> None:
        response = {
            "violations": [make_axe_violation("image-alt", nodes=2)],
            "passes": [{"id": "html-has-lang"}, {"id": "document-title"}],
            "incomplete": [{"id": "color-contrast"}],
            "inapplicable": [{"id": "video-caption"}],
        }
        result = parse_axe_response(response)
        assert result.passes_count == 2
        assert result.incomplete_count == 1
        finding = result.violations[0]
        assert finding.id == "image-alt"
        assert finding.impact == "critical"
        assert finding.help_url.endswith("/image-alt")
        assert [node.target for node in finding.nodes] == [["#node-0"], ["#node-1"]]

    def test_missing_lists_treated_as_empty(self) -> None:
        result = parse_axe_response({})
        assert result.violations == []
        assert result.passes_count == 0

    def test_error_key_raises(self) -> None:
        with pytest.raises(EngineError) as exc_info:
            parse_axe_response({"error": "axe is not defined"})
        assert "axe is not defined" in str(exc_info.value)

    def test_non_dict_raises(self) -> None:
        with pytest.raises(EngineError):
            parse_axe_response(None)


@pytest.mark.asyncio
async def test_axe_engine_passes_rule_options(make_axe_violation) -> None:
    axe = FakeAxe({"violations": [make_axe_violation()], "passes": [], "incomplete": []})
    engine = AxeEngine(axe=axe)
    rules = RuleSelection(standard=Standard.WCAG2AAA, rule_overrides={"region": False})

    result = await engine.analyze("page", rules)

    assert len(result.violations) == 1
    page, options = axe.calls[0]
    assert page == "page"
    assert options == {
        "runOnly": {"type": "tag", "values": ["wcag2aaa"]},
        "rules": {"region": {"enabled": False}},
    }


@pytest.mark.asyncio
async def test_axe_engine_wraps_run_failures() -> None:
    engine = AxeEngine(axe=FakeAxe(error=RuntimeError("page crashed")))
    with pytest.raises(EngineError) as exc_info:
        await engine.analyze("page", RuleSelection())
    assert "page crashed" in str(exc_info.value)
