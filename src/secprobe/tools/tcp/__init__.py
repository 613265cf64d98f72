"""TCP connect helpers for SecProbe."""

from .connector import PortOutcome, PortState, PortTarget, check_port

__all__ = ["PortOutcome", "PortState", "PortTarget", "check_port"]
