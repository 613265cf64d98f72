"""Environment variable and configuration file loading."""

from pathlib import Path
from typing import Any

import yaml

CONFIG_DIR_NAME = ".secprobe"


def global_config_dir() -> Path:
    """Return the global ~/.secprobe config directory."""
    return Path.home() / CONFIG_DIR_NAME


def is_global_config_dir(path: Path) -> bool:
    """Return True if the path is the global ~/.secprobe config directory."""
    home_config = global_config_dir()
    try:
        return path.resolve() == home_config.resolve()
    except FileNotFoundError:
        return path == home_config


def load_env_file(env_path: Path) -> dict[str, str]:
    """Load environment variables from .env file."""
    env_vars = {}
    if env_path.exists():
        with open(env_path) as f:
            for line in f:
                line = line.strip()
                if line and not line.startswith("#") and "=" in line:
                    key, value = line.split("=", 1)
                    # Remove quotes if present
                    value = value.strip().strip("\"'")
                    env_vars[key.strip()] = value
    return env_vars


def load_global_config() -> dict[str, Any]:
    """Load global configuration from ~/.secprobe/config.yml."""
    config_path = global_config_dir() / "config.yml"
    if config_path.exists():
        with open(config_path) as f:
            return yaml.safe_load(f) or {}
    return {}


def get_project_dir(start: Path | None = None) -> Path | None:
    """Find the nearest directory holding a .secprobe marker.

    The global ~/.secprobe folder is a config folder, not a project marker.
    """
    current = (start or Path.cwd()).resolve()
    while True:
        marker = current / CONFIG_DIR_NAME
        if marker.is_dir() and not is_global_config_dir(marker):
            return current
        if current == current.parent:
            return None
        current = current.parent


def get_project_env_path(project_dir: Path | None) -> Path | None:
    """Get the project .env path."""
    if project_dir is None:
        return None
    return project_dir / CONFIG_DIR_NAME / ".env"


def load_project_config(project_dir: Path | None = None) -> dict[str, str]:
    """Load project-specific configuration from .env file."""
    if project_dir is None:
        project_dir = get_project_dir()

    env_path = get_project_env_path(project_dir)
    if env_path:
        return load_env_file(env_path)
    return {}
