"""Exception types raised by SecProbe engines.

Transport failures (refused connections, timeouts, network errors) are never
raised; they are encoded in probe outcomes. Only malformed input to an engine
reaches the caller as an exception.
"""


class SecProbeError(Exception):
    """Base class for SecProbe errors."""


class MalformedInputError(SecProbeError, ValueError):
    """Raised for a bad URL, port range, concurrency value or collection file."""


class ScanCancelledError(SecProbeError):
    """Marks a target that was never started because the run was cancelled."""

    def __init__(self, message: str = "Scan cancelled before probe started"):
        super().__init__(message)
