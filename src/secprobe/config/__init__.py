"""
Configuration management for SecProbe.

Supports multiple configuration sources in order of priority:
1. Environment variables (highest priority)
2. Project .env file (.secprobe/.env)
3. Global config file (~/.secprobe/config.yml)
4. Default values (lowest priority)
"""

from .env_loader import (
    get_project_dir,
    get_project_env_path,
    global_config_dir,
    is_global_config_dir,
    load_env_file,
    load_global_config,
    load_project_config,
)
from .getters import get_bool, get_config, get_float, get_int
from .settings import ENV_KEYS, ProbeSettings, load_settings

__all__ = [
    "ENV_KEYS",
    "ProbeSettings",
    "get_bool",
    "get_config",
    "get_float",
    "get_int",
    "get_project_dir",
    "get_project_env_path",
    "global_config_dir",
    "is_global_config_dir",
    "load_env_file",
    "load_global_config",
    "load_project_config",
    "load_settings",
]
