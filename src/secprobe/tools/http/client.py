"""Single-request HTTP connector for probing endpoints."""

import logging
import time
from dataclasses import dataclass, field

import httpx

logger = logging.getLogger(__name__)

DEFAULT_HEADERS = {
    "User-Agent": "SecProbe/0.1 (API Security Tester)",
    "Accept": "application/json, text/plain, */*",
    "Content-Type": "application/json",
}


@dataclass(frozen=True)
class HTTPTarget:
    """One HTTP request to issue against an endpoint."""

    url: str
    method: str = "GET"
    body: bytes | str | None = None
    headers: dict[str, str] = field(default_factory=dict)


@dataclass
class HTTPOutcome:
    """Result of one HTTP probe: a response or a transport error."""

    target: HTTPTarget
    status_code: int | None = None
    headers: dict[str, str] = field(default_factory=dict)
    body: str = ""
    error: str | None = None
    response_time: float = 0.0

    @property
    def ok(self) -> bool:
        """True when a response was received."""
        return self.error is None and self.status_code is not None

    def header(self, name: str, default: str = "") -> str:
        """Case-insensitive header lookup."""
        return self.headers.get(name.lower(), default)


class HTTPClient:
    """Async HTTP client for probe operations.

    Certificate validation is disabled so that targets with self-signed
    certificates can still be tested. Redirects are not followed.
    """

    def __init__(
        self,
        timeout: float = 5.0,
        follow_redirects: bool = False,
        verify_ssl: bool = False,
        headers: dict[str, str] | None = None,
    ):
        self.timeout = timeout
        self.follow_redirects = follow_redirects
        self.verify_ssl = verify_ssl
        self.default_headers = {**DEFAULT_HEADERS, **(headers or {})}
        self.client: httpx.AsyncClient | None = None

    async def __aenter__(self):
        self.client = httpx.AsyncClient(
            timeout=self.timeout,
            follow_redirects=self.follow_redirects,
            verify=self.verify_ssl,
        )
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        if self.client:
            await self.client.aclose()
            self.client = None

    async def request(
        self,
        method: str,
        url: str,
        headers: dict[str, str] | None = None,
        content: bytes | str | None = None,
    ) -> httpx.Response:
        """Make an HTTP request; transport errors propagate as httpx exceptions."""
        if not self.client:
            raise RuntimeError("Client not initialized. Use async context manager.")

        return await self.client.request(
            method=method,
            url=url,
            headers={**self.default_headers, **(headers or {})},
            content=content,
        )

    async def probe(self, target: HTTPTarget) -> HTTPOutcome:
        """Issue one request and encode any failure in the returned outcome."""
        start = time.perf_counter()
        try:
            response = await self.request(
                target.method,
                target.url,
                headers=target.headers,
                content=target.body,
            )
        except httpx.TimeoutException:
            logger.debug("%s %s timed out", target.method, target.url)
            return HTTPOutcome(
                target=target,
                error="Request timeout",
                response_time=time.perf_counter() - start,
            )
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            logger.debug("%s %s failed: %s", target.method, target.url, exc)
            return HTTPOutcome(
                target=target,
                error=str(exc) or exc.__class__.__name__,
                response_time=time.perf_counter() - start,
            )

        return HTTPOutcome(
            target=target,
            status_code=response.status_code,
            headers={key.lower(): value for key, value in response.headers.items()},
            body=response.text,
            response_time=time.perf_counter() - start,
        )

    async def send(
        self,
        url: str,
        method: str = "GET",
        body: bytes | str | None = None,
        headers: dict[str, str] | None = None,
    ) -> HTTPOutcome:
        """Shorthand for probing a freshly built target."""
        return await self.probe(HTTPTarget(url=url, method=method, body=body, headers=headers or {}))
