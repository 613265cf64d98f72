"""HTTP helpers for SecProbe."""

from .client import DEFAULT_HEADERS, HTTPClient, HTTPOutcome, HTTPTarget

__all__ = [
    "DEFAULT_HEADERS",
    "HTTPClient",
    "HTTPOutcome",
    "HTTPTarget",
]
