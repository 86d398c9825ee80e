"""Process-wide runtime settings resolved once at startup."""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from .getters import get_bool, get_config, get_first_config, get_int

BROWSER_KEYS = ("A11YSCAN_BROWSER", "BROWSER")
HEADLESS_KEYS = ("A11YSCAN_HEADLESS", "HEADLESS")
OUTPUT_DIR_KEY = "A11YSCAN_OUTPUT_DIR"
NAVIGATION_TIMEOUT_KEY = "A11YSCAN_NAVIGATION_TIMEOUT_MS"
VERBOSE_KEY = "A11YSCAN_VERBOSE"

DEFAULT_NAVIGATION_TIMEOUT_MS = 30000


class BrowserType(str, Enum):
    """Playwright browser engines."""

    CHROMIUM = "chromium"
    FIREFOX = "firefox"
    WEBKIT = "webkit"

    @classmethod
    def parse(cls, value: str | None) -> "BrowserType":
        """Return the matching engine, defaulting to chromium."""
        name = (value or "").strip().lower()
        for member in cls:
            if member.value == name:
                return member
        return cls.CHROMIUM


@dataclass(frozen=True)
class RuntimeSettings:
    """Read-only settings shared by every scan and export."""

    browser_type: BrowserType = BrowserType.CHROMIUM
    headless: bool = True
    output_directory: Path = Path("output")
    navigation_timeout_ms: int = DEFAULT_NAVIGATION_TIMEOUT_MS
    verbose: bool = False

    @property
    def results_directory(self) -> Path:
        """Directory that receives exported violation reports."""
        return self.output_directory / "accessibility-test-results"


def load_settings(project_dir: Path | None = None) -> RuntimeSettings:
    """Resolve runtime settings from environment, .env, global config and defaults."""
    root = project_dir or Path.cwd()
    output_dir = get_config(OUTPUT_DIR_KEY, project_dir)
    return RuntimeSettings(
        browser_type=BrowserType.parse(get_first_config(BROWSER_KEYS, project_dir)),
        headless=get_bool(HEADLESS_KEYS, project_dir, default=True),
        output_directory=Path(output_dir) if output_dir else root / "output",
        navigation_timeout_ms=get_int(
            NAVIGATION_TIMEOUT_KEY, project_dir, default=DEFAULT_NAVIGATION_TIMEOUT_MS
        ),
        verbose=get_bool((VERBOSE_KEY,), project_dir, default=False),
    )
