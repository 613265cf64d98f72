"""HTTP method enumeration."""

from ..models import ResultStatus, Severity
from .base import PhaseContext

PHASE = "http_methods"
PROBED_METHODS = ("OPTIONS", "HEAD", "PUT", "DELETE", "PATCH", "TRACE")
REJECTED_STATUSES = (405, 501)


async def check_http_methods(ctx: PhaseContext) -> None:
    """List methods the server does not reject and flag TRACE."""
    allowed: list[str] = []
    for method in PROBED_METHODS:
        response = await ctx.send(PHASE, ctx.url, method)
        if response is None:
            continue
        if response.status_code not in REJECTED_STATUSES:
            allowed.append(method)

    if "TRACE" in allowed:
        ctx.session.add_finding(
            Severity.LOW,
            "TRACE Method Enabled",
            "TRACE method can lead to XST attacks",
            "Disable TRACE method",
        )

    if allowed:
        ctx.session.add_result(
            ResultStatus.INFO, "Allowed Methods", f"Methods: {', '.join(allowed)}"
        )
