"""Vulnerability test pipeline for HTTP endpoints."""

from .aggregator import by_severity, security_score, severity_counts
from .collection import Collection, CollectionRun, Endpoint, load_collection, parse_collection
from .models import Finding, ProbeError, Result, ResultStatus, ScanSession, Severity
from .phases import DEFAULT_PHASES, Phase, PhaseContext
from .pipeline import VulnTestPipeline, normalize_target

__all__ = [
    "Collection",
    "CollectionRun",
    "DEFAULT_PHASES",
    "Endpoint",
    "Finding",
    "Phase",
    "PhaseContext",
    "ProbeError",
    "Result",
    "ResultStatus",
    "ScanSession",
    "Severity",
    "VulnTestPipeline",
    "by_severity",
    "load_collection",
    "normalize_target",
    "parse_collection",
    "security_score",
    "severity_counts",
]
