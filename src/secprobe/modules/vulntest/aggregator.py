"""Read-only views over a session's findings."""

from .models import Finding, ScanSession, Severity

MAX_SCORE = 100


def security_score(session: ScanSession) -> int:
    """Weighted deduction score in [0, 100]."""
    deductions = sum(finding.severity.weight for finding in session.findings)
    return max(0, MAX_SCORE - deductions)


def by_severity(session: ScanSession) -> dict[Severity, list[Finding]]:
    """Partition findings into the four severity buckets, keeping discovery order."""
    buckets: dict[Severity, list[Finding]] = {severity: [] for severity in Severity}
    for finding in session.findings:
        buckets[finding.severity].append(finding)
    return buckets


def severity_counts(session: ScanSession) -> dict[str, int]:
    return {severity.value: len(items) for severity, items in by_severity(session).items()}
