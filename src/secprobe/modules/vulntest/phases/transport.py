"""Transport and baseline response checks."""

from urllib.parse import urlparse

from ..models import ResultStatus, Severity
from .base import PhaseContext

PHASE = "transport"


async def check_transport(ctx: PhaseContext) -> None:
    """Flag plaintext HTTP and technology-revealing response headers."""
    session = ctx.session
    if urlparse(ctx.url).scheme.lower() == "http":
        session.add_finding(
            Severity.HIGH,
            "Insecure Protocol",
            "API uses HTTP instead of HTTPS",
            "Use HTTPS for all endpoints",
        )
    else:
        session.add_result(ResultStatus.PASS, "HTTPS Protocol", "Endpoint uses HTTPS")

    response = await ctx.send(PHASE, ctx.url, ctx.method)
    if response is None:
        return

    session.add_result(ResultStatus.INFO, "Status Code", f"Response: {response.status_code}")

    server = response.header("server")
    if server:
        session.add_finding(
            Severity.LOW,
            "Server Header Exposed",
            f"Server: {server}",
            "Remove or obfuscate Server header",
        )

    powered_by = response.header("x-powered-by")
    if powered_by:
        session.add_finding(
            Severity.LOW,
            "Technology Stack Exposed",
            f"X-Powered-By: {powered_by}",
            "Remove X-Powered-By header",
        )
