"""JSON report rendering."""

import json
from datetime import datetime
from pathlib import Path
from typing import Any

from secprobe.modules.portscan import PortScanReport
from secprobe.modules.vulntest import ScanSession, security_score, severity_counts


def build_report(session: ScanSession, generated_at: datetime | None = None) -> dict[str, Any]:
    """Render one session into the export document."""
    generated_at = generated_at or datetime.now()
    return {
        "timestamp": generated_at.isoformat(),
        "target": {"url": session.url, "method": session.method},
        "vulnerabilities": [
            {
                "severity": finding.severity.value.upper(),
                "name": finding.kind,
                "detail": finding.detail,
                "remediation": finding.remediation,
            }
            for finding in session.findings
        ],
        "testResults": [
            {
                "type": result.status.value.upper(),
                "name": result.name,
                "detail": result.detail,
            }
            for result in session.results
        ],
        "errors": [{"phase": error.phase, "message": error.message} for error in session.errors],
        "summary": severity_counts(session),
        "securityScore": security_score(session),
    }


def build_collection_report(
    name: str, sessions: list[ScanSession], generated_at: datetime | None = None
) -> dict[str, Any]:
    """Render several sessions, with totals summed across them."""
    generated_at = generated_at or datetime.now()
    reports = [build_report(session, generated_at) for session in sessions]
    totals = {"critical": 0, "high": 0, "medium": 0, "low": 0}
    for report in reports:
        for key in totals:
            totals[key] += report["summary"][key]
    return {
        "timestamp": generated_at.isoformat(),
        "name": name,
        "endpoints": reports,
        "summary": totals,
    }


def build_port_report(report: PortScanReport) -> dict[str, Any]:
    return {
        "timestamp": report.started_at.isoformat(),
        "host": report.host,
        "range": {"start": report.start_port, "end": report.end_port},
        "openPorts": [{"port": item.port, "service": item.service} for item in report.open_ports],
        "securityNotes": [
            {"port": note.port, "service": note.service, "message": note.message}
            for note in report.security_notes
        ],
        "totalScanned": report.total_scanned,
        "durationMs": round(report.duration_ms, 2),
        "cancelled": report.cancelled,
    }


def default_report_path(prefix: str = "api-test-report") -> Path:
    return Path(f"{prefix}-{datetime.now().strftime('%Y%m%d_%H%M%S')}.json")


def write_json(data: dict[str, Any], path: Path | None = None) -> Path:
    """Write a report document and return the file path."""
    report_file = Path(path) if path else default_report_path()
    report_file.parent.mkdir(parents=True, exist_ok=True)
    report_file.write_text(json.dumps(data, indent=2), encoding="utf-8")
    return report_file


def write_json_report(
    sessions: ScanSession | list[ScanSession], path: Path | None = None
) -> Path:
    """Write one session, or several as a collection document."""
    if isinstance(sessions, ScanSession):
        return write_json(build_report(sessions), path)
    return write_json(build_collection_report("API Test Collection", sessions), path)
