"""Endpoint collection files.

A collection is a JSON document::

    {"name": "API Test Collection",
     "endpoints": [{"url": "https://api.example.com/users", "method": "GET"}]}
"""

import json
from dataclasses import dataclass, field
from pathlib import Path

from secprobe.errors import MalformedInputError

from .models import ScanSession


@dataclass(frozen=True)
class Endpoint:
    url: str
    method: str = "GET"


@dataclass
class Collection:
    """Named list of endpoints to test one after another."""

    name: str
    endpoints: list[Endpoint] = field(default_factory=list)


@dataclass
class CollectionRun:
    """Outcome of testing one collection endpoint."""

    endpoint: Endpoint
    session: ScanSession | None = None
    error: str | None = None


def parse_collection(data: object) -> Collection:
    """Validate decoded JSON and build a Collection."""
    if not isinstance(data, dict):
        raise MalformedInputError("Collection must be a JSON object")
    endpoints = data.get("endpoints")
    if not isinstance(endpoints, list):
        raise MalformedInputError("Collection must contain an 'endpoints' list")

    parsed: list[Endpoint] = []
    for index, item in enumerate(endpoints):
        if not isinstance(item, dict):
            raise MalformedInputError(f"Endpoint #{index + 1} must be an object")
        url = item.get("url")
        method = item.get("method") or "GET"
        parsed.append(Endpoint(url=str(url) if url is not None else "", method=str(method)))

    return Collection(name=str(data.get("name") or "Unnamed Collection"), endpoints=parsed)


def load_collection(path: Path) -> Collection:
    """Read and parse a collection file."""
    try:
        raw = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise MalformedInputError(f"Failed to load collection {path}: {exc}") from exc
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise MalformedInputError(f"Collection {path} is not valid JSON: {exc}") from exc
    return parse_collection(data)
