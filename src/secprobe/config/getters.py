"""Configuration getter functions."""

import logging
import os
from pathlib import Path
from typing import Any

from .env_loader import load_global_config, load_project_config

logger = logging.getLogger(__name__)

TRUTHY = {"1", "true", "yes", "on"}


def get_config(key: str, project_dir: Path | None = None, default: Any = None) -> Any:
    """
    Get configuration value with priority:
    1. Environment variable
    2. Project .env file
    3. Global config file
    4. Default value

    Args:
        key: Configuration key
        project_dir: Optional project directory
        default: Default value if not found

    Returns:
        Configuration value or default
    """
    # 1. Check environment variable
    env_value = os.environ.get(key)
    if env_value:
        return env_value

    # 2. Check project .env file
    project_config = load_project_config(project_dir)
    if key in project_config:
        return project_config[key]

    # 3. Check global config
    global_config = load_global_config()
    if key in global_config:
        return global_config[key]

    # 4. Return default
    return default


def get_float(key: str, default: float, project_dir: Path | None = None) -> float:
    """Read a positive float setting, falling back to *default* on bad values."""
    raw = get_config(key, project_dir, default)
    try:
        value = float(raw)
    except (TypeError, ValueError):
        logger.warning("Ignoring invalid value for %s: %r", key, raw)
        return default
    if value <= 0:
        logger.warning("Ignoring non-positive value for %s: %r", key, raw)
        return default
    return value


def get_int(key: str, default: int, project_dir: Path | None = None) -> int:
    """Read a positive integer setting, falling back to *default* on bad values."""
    raw = get_config(key, project_dir, default)
    try:
        value = int(raw)
    except (TypeError, ValueError):
        logger.warning("Ignoring invalid value for %s: %r", key, raw)
        return default
    if value < 1:
        logger.warning("Ignoring non-positive value for %s: %r", key, raw)
        return default
    return value


def get_bool(key: str, default: bool = False, project_dir: Path | None = None) -> bool:
    """Read a boolean flag (1/true/yes/on)."""
    raw = get_config(key, project_dir)
    if raw is None:
        return default
    if isinstance(raw, bool):
        return raw
    return str(raw).strip().lower() in TRUTHY
