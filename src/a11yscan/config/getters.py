"""Resolve individual settings across all configuration sources."""

import os
from collections.abc import Iterator, Mapping
from pathlib import Path
from typing import Any

from .env_loader import load_global_config, load_project_config

TRUTHY = {"1", "true", "yes", "on"}


def _sources(project_dir: Path | None) -> Iterator[Mapping[str, Any]]:
    # highest priority first; files are only read if earlier sources miss
    yield {key: value for key, value in os.environ.items() if value}
    yield load_project_config(project_dir)
    yield load_global_config()


def get_config(key: str, project_dir: Path | None = None, default: Any = None) -> Any:
    """Look ``key`` up in the environment, the project .env, then the global config.

    Empty environment variables are treated as unset. ``default`` is returned
    when no source defines the key.
    """
    for source in _sources(project_dir):
        if key in source:
            return source[key]
    return default


def get_first_config(
    keys: tuple[str, ...], project_dir: Path | None = None, default: Any = None
) -> Any:
    """Return the value of the first key in ``keys`` that is set anywhere."""
    for key in keys:
        value = get_config(key, project_dir)
        if value not in (None, ""):
            return value
    return default


def get_bool(keys: tuple[str, ...], project_dir: Path | None = None, default: bool = False) -> bool:
    value = get_first_config(keys, project_dir)
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in TRUTHY


def get_int(key: str, project_dir: Path | None = None, default: int = 0) -> int:
    """Return a positive integer setting; malformed or non-positive values give ``default``."""
    try:
        number = int(get_config(key, project_dir))
    except (TypeError, ValueError):
        return default
    return number if number > 0 else default
