"""Resolved runtime settings for the probe engines."""

from dataclasses import dataclass
from pathlib import Path

from .getters import get_bool, get_float, get_int

ENV_KEYS = (
    "SECPROBE_PORT_TIMEOUT",
    "SECPROBE_HTTP_TIMEOUT",
    "SECPROBE_MAX_CONCURRENCY",
    "SECPROBE_PROGRESS_EVERY",
    "SECPROBE_COLLECTION_DELAY",
    "SECPROBE_RATE_LIMIT_REQUESTS",
    "SECPROBE_RATE_LIMIT_INTERVAL",
    "SECPROBE_VERBOSE",
)


@dataclass
class ProbeSettings:
    """Engine defaults; timeouts and delays are in seconds."""

    port_timeout: float = 1.0
    http_timeout: float = 5.0
    max_concurrency: int = 100
    progress_every: int = 100
    collection_delay: float = 1.0
    rate_limit_requests: int = 15
    rate_limit_interval: float = 0.1
    verbose: bool = False


def load_settings(project_dir: Path | None = None) -> ProbeSettings:
    """Resolve settings from env vars, project .env, global config and defaults."""
    defaults = ProbeSettings()
    return ProbeSettings(
        port_timeout=get_float("SECPROBE_PORT_TIMEOUT", defaults.port_timeout, project_dir),
        http_timeout=get_float("SECPROBE_HTTP_TIMEOUT", defaults.http_timeout, project_dir),
        max_concurrency=get_int(
            "SECPROBE_MAX_CONCURRENCY", defaults.max_concurrency, project_dir
        ),
        progress_every=get_int("SECPROBE_PROGRESS_EVERY", defaults.progress_every, project_dir),
        collection_delay=get_float(
            "SECPROBE_COLLECTION_DELAY", defaults.collection_delay, project_dir
        ),
        rate_limit_requests=get_int(
            "SECPROBE_RATE_LIMIT_REQUESTS", defaults.rate_limit_requests, project_dir
        ),
        rate_limit_interval=get_float(
            "SECPROBE_RATE_LIMIT_INTERVAL", defaults.rate_limit_interval, project_dir
        ),
        verbose=get_bool("SECPROBE_VERBOSE", defaults.verbose, project_dir),
    )
