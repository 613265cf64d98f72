"""TCP port scan engine."""

import asyncio
import logging
import time
from collections.abc import Callable

from secprobe.errors import MalformedInputError
from secprobe.tools.tcp import PortOutcome, PortState, PortTarget, check_port
from secprobe.utils.scheduler import ProgressCallback, run_all

from .models import OpenPort, PortScanReport, SecurityNote
from .services import SENSITIVE_PORTS, service_name

logger = logging.getLogger(__name__)

MAX_PORT = 65535


def validate_range(host: str, start_port: int, end_port: int) -> None:
    """Reject empty hosts and ranges outside 1..65535 or reversed."""
    if not host or not host.strip():
        raise MalformedInputError("Host must not be empty")
    if not (1 <= start_port <= MAX_PORT and 1 <= end_port <= MAX_PORT):
        raise MalformedInputError(
            f"Ports must be between 1 and {MAX_PORT}, got {start_port}-{end_port}"
        )
    if start_port > end_port:
        raise MalformedInputError(f"Start port {start_port} is greater than end port {end_port}")


class PortScanner:
    """Connect-scan a contiguous port range on one host."""

    def __init__(
        self,
        timeout: float = 1.0,
        max_concurrency: int = 100,
        progress_every: int = 100,
        connector: Callable | None = None,
    ):
        if max_concurrency < 1:
            raise MalformedInputError(f"max_concurrency must be >= 1, got {max_concurrency}")
        self.timeout = timeout
        self.max_concurrency = max_concurrency
        self.progress_every = progress_every
        self._connector = connector or check_port

    async def scan(
        self,
        host: str,
        start_port: int = 1,
        end_port: int = 1024,
        progress: ProgressCallback | None = None,
        on_open: Callable[[OpenPort], None] | None = None,
        cancel_event: asyncio.Event | None = None,
    ) -> PortScanReport:
        """Scan ``[start_port, end_port]`` inclusive and report open ports."""
        validate_range(host, start_port, end_port)
        host = host.strip()
        report = PortScanReport(host=host, start_port=start_port, end_port=end_port)
        targets = [PortTarget(host, port) for port in range(start_port, end_port + 1)]

        logger.info(
            "Scanning %s ports %d-%d (concurrency=%d, timeout=%.2fs)",
            host,
            start_port,
            end_port,
            self.max_concurrency,
            self.timeout,
        )

        async def probe(target: PortTarget) -> PortOutcome:
            outcome = await self._connector(target, self.timeout)
            if outcome.is_open:
                logger.debug("Port %d open on %s", target.port, host)
                if on_open:
                    on_open(OpenPort(target.port, service_name(target.port)))
            return outcome

        started = time.perf_counter()
        outcomes = await run_all(
            targets,
            probe,
            self.max_concurrency,
            on_error=_error_outcome,
            progress=progress,
            progress_every=self.progress_every,
            cancel_event=cancel_event,
        )
        report.duration_ms = (time.perf_counter() - started) * 1000
        report.total_scanned = len(outcomes)
        report.cancelled = bool(cancel_event and cancel_event.is_set())

        # Single writer: the index-aligned outcome list is walked once here.
        for outcome in outcomes:
            if not outcome.is_open:
                continue
            port = outcome.target.port
            service = service_name(port)
            report.open_ports.append(OpenPort(port, service))
            if port in SENSITIVE_PORTS:
                report.security_notes.append(SecurityNote(port, service))

        logger.info(
            "Scan of %s finished: %d open of %d in %.0f ms",
            host,
            len(report.open_ports),
            report.total_scanned,
            report.duration_ms,
        )
        return report


def _error_outcome(target: PortTarget, exc: BaseException) -> PortOutcome:
    return PortOutcome(target, PortState.ERROR, str(exc) or exc.__class__.__name__)
