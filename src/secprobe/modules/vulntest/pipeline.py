"""Vulnerability test pipeline: runs the ordered phases against one endpoint."""

import asyncio
import logging
import re
from collections.abc import Awaitable, Callable, Sequence
from urllib.parse import urlparse

from secprobe.config import ProbeSettings
from secprobe.errors import MalformedInputError
from secprobe.tools.http import HTTPClient
from secprobe.utils.scheduler import TaskFailure, run_all

from .collection import Collection, CollectionRun
from .models import ScanSession
from .phases import DEFAULT_PHASES, Phase, PhaseContext

logger = logging.getLogger(__name__)

_METHOD_RE = re.compile(r"^[A-Z]+$")


def normalize_target(url: str, method: str = "GET") -> tuple[str, str]:
    """Validate an endpoint URL and HTTP method, returning cleaned values."""
    url = (url or "").strip()
    try:
        parsed = urlparse(url)
        hostname = parsed.hostname
    except ValueError as exc:
        raise MalformedInputError(f"Invalid URL: {url!r} ({exc})") from exc
    if parsed.scheme.lower() not in ("http", "https") or not hostname:
        raise MalformedInputError(f"Invalid URL: {url!r} (expected http(s)://host/...)")
    method = (method or "GET").strip().upper()
    if not _METHOD_RE.match(method):
        raise MalformedInputError(f"Invalid HTTP method: {method!r}")
    return url, method


class VulnTestPipeline:
    """Run the six test phases serially and collect findings into a session.

    The pipeline holds configuration only; each call to :meth:`test_endpoint`
    creates its own session and HTTP client.
    """

    def __init__(
        self,
        timeout: float = 5.0,
        rate_limit_requests: int = 15,
        rate_limit_interval: float = 0.1,
        phases: Sequence[Phase] = DEFAULT_PHASES,
        client_factory: Callable[..., HTTPClient] = HTTPClient,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        self.timeout = timeout
        self.rate_limit_requests = rate_limit_requests
        self.rate_limit_interval = rate_limit_interval
        self.phases = tuple(phases)
        self._client_factory = client_factory
        self._sleep = sleep

    @classmethod
    def from_settings(cls, settings: ProbeSettings, **kwargs) -> "VulnTestPipeline":
        return cls(
            timeout=settings.http_timeout,
            rate_limit_requests=settings.rate_limit_requests,
            rate_limit_interval=settings.rate_limit_interval,
            **kwargs,
        )

    async def test_endpoint(
        self,
        url: str,
        method: str = "GET",
        progress: Callable[[Phase], None] | None = None,
    ) -> ScanSession:
        """Test one endpoint; raises MalformedInputError only for bad input."""
        url, method = normalize_target(url, method)
        session = ScanSession(url=url, method=method)
        logger.info("Testing %s %s", method, url)

        async with self._client_factory(timeout=self.timeout) as client:
            ctx = PhaseContext(
                client=client,
                session=session,
                rate_limit_requests=self.rate_limit_requests,
                rate_limit_interval=self.rate_limit_interval,
                sleep=self._sleep,
            )

            async def execute(phase: Phase) -> None:
                if progress:
                    progress(phase)
                logger.debug("Running phase %s", phase.name)
                await phase.run(ctx)

            def phase_failed(phase: Phase, exc: BaseException) -> TaskFailure:
                logger.warning("Phase %s failed: %s", phase.name, exc)
                session.add_error(phase.name, str(exc) or exc.__class__.__name__)
                return TaskFailure(target=phase, message=str(exc))

            # Serial on purpose: concurrent phases would trip the target's rate limiter.
            await run_all(self.phases, execute, 1, on_error=phase_failed)

        logger.info(
            "Finished %s %s: %d findings, %d results, %d errors",
            method,
            url,
            len(session.findings),
            len(session.results),
            len(session.errors),
        )
        return session

    async def run_collection(
        self,
        collection: Collection,
        delay: float = 1.0,
        progress: Callable[[Phase], None] | None = None,
    ) -> list[CollectionRun]:
        """Test every endpoint in order with a fixed pause between tests."""
        runs: list[CollectionRun] = []
        for index, endpoint in enumerate(collection.endpoints):
            if index:
                await self._sleep(delay)
            try:
                session = await self.test_endpoint(endpoint.url, endpoint.method, progress)
            except MalformedInputError as exc:
                logger.warning("Skipping endpoint %r: %s", endpoint.url, exc)
                runs.append(CollectionRun(endpoint=endpoint, error=str(exc)))
                continue
            runs.append(CollectionRun(endpoint=endpoint, session=session))
        return runs
