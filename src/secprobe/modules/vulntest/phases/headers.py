"""Security header checks."""

from ..models import ResultStatus, Severity
from .base import PhaseContext

PHASE = "headers"

# header -> (severity when missing, display name)
EXPECTED_HEADERS: dict[str, tuple[Severity, str]] = {
    "strict-transport-security": (Severity.HIGH, "HSTS"),
    "x-frame-options": (Severity.MEDIUM, "X-Frame-Options"),
    "x-content-type-options": (Severity.MEDIUM, "X-Content-Type-Options"),
    "content-security-policy": (Severity.HIGH, "CSP"),
    "x-xss-protection": (Severity.LOW, "X-XSS-Protection"),
    "referrer-policy": (Severity.LOW, "Referrer-Policy"),
}


async def check_security_headers(ctx: PhaseContext) -> None:
    """Report missing hardening headers and a wildcard CORS policy."""
    response = await ctx.send(PHASE, ctx.url, "GET")
    if response is None:
        return

    session = ctx.session
    for header, (severity, name) in EXPECTED_HEADERS.items():
        value = response.header(header)
        if value:
            session.add_result(ResultStatus.PASS, name, f"Header present: {value}")
        else:
            session.add_finding(
                severity,
                f"Missing {name}",
                f"{name} header not set",
                f"Add {header} header",
            )

    if response.header("access-control-allow-origin").strip() == "*":
        session.add_finding(
            Severity.MEDIUM,
            "Open CORS Policy",
            "CORS allows all origins (*)",
            "Restrict CORS to specific origins",
        )
