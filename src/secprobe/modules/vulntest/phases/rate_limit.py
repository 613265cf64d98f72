"""Rate-limit probing."""

from ..models import ResultStatus, Severity
from .base import PhaseContext

PHASE = "rate_limiting"


async def check_rate_limiting(ctx: PhaseContext) -> None:
    """Send a short burst of sequential requests and look for HTTP 429."""
    requests = ctx.rate_limit_requests
    success_count = 0
    rate_limited = False

    for index in range(requests):
        response = await ctx.send(PHASE, ctx.url, ctx.method)
        if response is None:
            return
        if response.status_code == 429:
            rate_limited = True
            break
        if response.status_code == 200:
            success_count += 1
        if index < requests - 1:
            await ctx.sleep(ctx.rate_limit_interval)

    if rate_limited:
        ctx.session.add_result(ResultStatus.PASS, "Rate Limiting", "Endpoint has rate limiting")
    elif success_count == requests:
        ctx.session.add_finding(
            Severity.MEDIUM,
            "No Rate Limiting",
            "Endpoint accepts unlimited requests",
            "Implement rate limiting",
        )
