"""
Configuration management for a11yscan.

Supports multiple configuration sources in order of priority:
1. Environment variables (highest priority)
2. Project .env file
3. Global config file (~/.a11yscan/config.yml)
4. Default values (lowest priority)
"""

from .env_loader import (
    global_config_dir,
    load_env_file,
    load_global_config,
    load_project_config,
)
from .getters import get_bool, get_config, get_first_config, get_int
from .settings import BrowserType, RuntimeSettings, load_settings

__all__ = [
    # env_loader
    "global_config_dir",
    "load_env_file",
    "load_global_config",
    "load_project_config",
    # getters
    "get_bool",
    "get_config",
    "get_first_config",
    "get_int",
    # settings
    "BrowserType",
    "RuntimeSettings",
    "load_settings",
]
