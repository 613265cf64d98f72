"""Port scan engine for SecProbe."""

from .engine import PortScanner, validate_range
from .models import OpenPort, PortScanReport, SecurityNote
from .services import SENSITIVE_PORTS, SERVICE_TABLE, service_name

__all__ = [
    "OpenPort",
    "PortScanReport",
    "PortScanner",
    "SENSITIVE_PORTS",
    "SERVICE_TABLE",
    "SecurityNote",
    "service_name",
    "validate_range",
]
