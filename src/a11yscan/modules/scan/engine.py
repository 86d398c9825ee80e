"""Rule-engine contract and the axe-core implementation."""

from abc import ABC, abstractmethod
from typing import Any

from axe_playwright_python.async_playwright import Axe
from playwright.async_api import Page

from a11yscan.errors import EngineError

from .models import EngineResult, RawFinding, RuleSelection


class AccessibilityEngine(ABC):
    """Runs accessibility rules against a loaded page."""

    @abstractmethod
    async def analyze(self, page: Page, rules: RuleSelection) -> EngineResult:
        """Evaluate ``rules`` on ``page`` and return every finding."""


class AxeEngine(AccessibilityEngine):
    """axe-core injected through axe-playwright-python."""

    def __init__(self, axe: Any = None):
        self._axe = axe or Axe()

    async def analyze(self, page: Page, rules: RuleSelection) -> EngineResult:
        try:
            results = await self._axe.run(page, options=rules.to_axe_options())
        except Exception as exc:
            raise EngineError(f"axe-core analysis failed: {exc}") from exc
        return parse_axe_response(getattr(results, "response", results))


def parse_axe_response(response: Any) -> EngineResult:
    """Convert the raw ``axe.run`` result object into an EngineResult."""
    if not isinstance(response, dict):
        raise EngineError(f"Unexpected axe-core result: {type(response).__name__}")
    if response.get("error"):
        raise EngineError(f"axe-core reported an error: {response['error']}")
    return EngineResult(
        violations=[RawFinding.from_axe(item) for item in response.get("violations") or []],
        passes_count=len(response.get("passes") or []),
        incomplete_count=len(response.get("incomplete") or []),
    )
