"""Authentication probing."""

import base64

from ..models import ResultStatus, Severity
from ..payloads import DEFAULT_CREDENTIALS, INVALID_BEARER_TOKEN
from .base import PhaseContext

AUTH_PHASE = "authentication"


def basic_auth_header(user: str, password: str) -> str:
    token = base64.b64encode(f"{user}:{password}".encode()).decode("ascii")
    return f"Basic {token}"


async def check_authentication(ctx: PhaseContext) -> None:
    """Probe unauthenticated access, invalid tokens and default credentials."""
    session = ctx.session

    baseline = await ctx.send(AUTH_PHASE, ctx.url, ctx.method)
    if baseline is not None:
        if baseline.status_code == 200:
            session.add_finding(
                Severity.HIGH,
                "No Authentication Required",
                "Endpoint accessible without authentication",
                "Implement authentication",
            )
        elif baseline.status_code in (401, 403):
            session.add_result(
                ResultStatus.PASS,
                "Authentication Required",
                "Endpoint requires authentication",
            )

    invalid = await ctx.send(
        AUTH_PHASE,
        ctx.url,
        ctx.method,
        headers={"Authorization": f"Bearer {INVALID_BEARER_TOKEN}"},
    )
    if invalid is not None and invalid.status_code == 200:
        session.add_finding(
            Severity.CRITICAL,
            "Broken Authentication",
            "Endpoint accepts invalid tokens",
            "Validate authentication tokens",
        )

    for user, password in DEFAULT_CREDENTIALS:
        response = await ctx.send(
            AUTH_PHASE,
            ctx.url,
            ctx.method,
            headers={"Authorization": basic_auth_header(user, password)},
        )
        if response is None:
            break
        if response.status_code == 200:
            session.add_finding(
                Severity.CRITICAL,
                "Default Credentials",
                f"Accepts default credentials: {user}/{password}",
                "Change default credentials",
            )
            break

