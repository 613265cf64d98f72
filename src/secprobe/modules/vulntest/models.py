"""Findings, results and the per-run session they accumulate in."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class Severity(str, Enum):
    """Closed set of finding severities, highest first."""

    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def weight(self) -> int:
        """Points deducted from the security score per finding."""
        return _SEVERITY_WEIGHTS[self]


_SEVERITY_WEIGHTS = {
    Severity.CRITICAL: 25,
    Severity.HIGH: 15,
    Severity.MEDIUM: 10,
    Severity.LOW: 5,
}


class ResultStatus(str, Enum):
    """Status of a non-actionable observation."""

    PASS = "pass"
    INFO = "info"


@dataclass(frozen=True)
class Finding:
    """An actionable, severity-tagged security observation."""

    severity: Severity
    kind: str
    detail: str
    remediation: str


@dataclass(frozen=True)
class Result:
    """A pass or informational observation."""

    status: ResultStatus
    name: str
    detail: str


@dataclass(frozen=True)
class ProbeError:
    """A probe or phase failure captured during a run."""

    phase: str
    message: str


@dataclass
class ScanSession:
    """Append-only record of one vulnerability test run against one endpoint."""

    url: str
    method: str = "GET"
    findings: list[Finding] = field(default_factory=list)
    results: list[Result] = field(default_factory=list)
    errors: list[ProbeError] = field(default_factory=list)
    started_at: datetime = field(default_factory=datetime.now)

    def add_finding(
        self, severity: Severity, kind: str, detail: str, remediation: str
    ) -> Finding:
        finding = Finding(severity=severity, kind=kind, detail=detail, remediation=remediation)
        self.findings.append(finding)
        return finding

    def add_result(self, status: ResultStatus, name: str, detail: str) -> Result:
        result = Result(status=status, name=name, detail=detail)
        self.results.append(result)
        return result

    def add_error(self, phase: str, message: str) -> ProbeError:
        error = ProbeError(phase=phase, message=message)
        self.errors.append(error)
        return error
