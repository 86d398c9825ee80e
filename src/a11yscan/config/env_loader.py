"""Read settings from a project .env file and the global YAML config."""

from pathlib import Path
from typing import Any

import yaml

GLOBAL_CONFIG_NAME = "config.yml"


def global_config_dir() -> Path:
    """Return ~/.a11yscan, where the global config file lives."""
    return Path.home() / ".a11yscan"


def load_env_file(env_path: Path) -> dict[str, str]:
    """Parse ``KEY=value`` lines, skipping blanks and ``#`` comments."""
    if not env_path.is_file():
        return {}
    values: dict[str, str] = {}
    for raw in env_path.read_text().splitlines():
        entry = raw.strip()
        if not entry or entry.startswith("#"):
            continue
        key, sep, value = entry.partition("=")
        if sep:
            # surrounding quotes are optional
            values[key.strip()] = value.strip().strip("\"'")
    return values


def load_global_config() -> dict[str, Any]:
    """Return the mapping in ~/.a11yscan/config.yml, or {} when absent or empty."""
    path = global_config_dir() / GLOBAL_CONFIG_NAME
    if not path.is_file():
        return {}
    data = yaml.safe_load(path.read_text())
    return data if isinstance(data, dict) else {}


def load_project_config(project_dir: Path | None = None) -> dict[str, str]:
    """Read ``.env`` from ``project_dir``, defaulting to the working directory."""
    return load_env_file((project_dir or Path.cwd()) / ".env")
