"""Data models for port scan results."""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class OpenPort:
    """A port confirmed open during a scan."""

    port: int
    service: str


@dataclass(frozen=True)
class SecurityNote:
    """Advisory raised for an open port in the sensitive set."""

    port: int
    service: str
    message: str = "Consider closing if unused"


@dataclass
class PortScanReport:
    """Outcome of one scan over a contiguous port range."""

    host: str
    start_port: int
    end_port: int
    open_ports: list[OpenPort] = field(default_factory=list)
    total_scanned: int = 0
    duration_ms: float = 0.0
    security_notes: list[SecurityNote] = field(default_factory=list)
    started_at: datetime = field(default_factory=datetime.now)
    cancelled: bool = False
