"""Shared plumbing for pipeline phases."""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field

from secprobe.tools.http import HTTPClient, HTTPOutcome

from ..models import ScanSession

logger = logging.getLogger(__name__)


@dataclass
class PhaseContext:
    """Everything a phase needs for one run; the session is the only mutable part."""

    client: HTTPClient
    session: ScanSession
    rate_limit_requests: int = 15
    rate_limit_interval: float = 0.1
    sleep: Callable[[float], Awaitable[None]] = field(default=asyncio.sleep)

    @property
    def url(self) -> str:
        return self.session.url

    @property
    def method(self) -> str:
        return self.session.method

    async def send(
        self,
        phase: str,
        url: str,
        method: str,
        body: bytes | str | None = None,
        headers: dict[str, str] | None = None,
    ) -> HTTPOutcome | None:
        """Probe once; on transport failure record it and return None."""
        outcome = await self.client.send(url, method, body=body, headers=headers)
        if outcome.ok:
            return outcome
        logger.warning("[%s] %s %s failed: %s", phase, method, url, outcome.error)
        self.session.add_error(phase, f"{method} {url}: {outcome.error}")
        return None


@dataclass(frozen=True)
class Phase:
    """One named, ordered stage of the pipeline."""

    name: str
    title: str
    run: Callable[[PhaseContext], Awaitable[None]]
