"""Input validation and injection probing."""

import json
from urllib.parse import quote

from ..models import ResultStatus, Severity
from ..payloads import (
    NOSQL_PAYLOADS,
    OVERSIZED_PAYLOAD_CHARS,
    PATH_TRAVERSAL_PAYLOADS,
    SQL_ERROR_MARKERS,
    SQL_PAYLOADS,
    TRAVERSAL_MARKERS,
    XSS_PAYLOADS,
)
from .base import PhaseContext

PHASE = "input_validation"
QUERY_PAYLOADS_PER_CORPUS = 2


def with_query_param(url: str, name: str, value: str) -> str:
    """Append ``name=value`` to the URL's query string, percent-encoding the value."""
    separator = "&" if "?" in url else "?"
    return f"{url}{separator}{name}={quote(value, safe='')}"


async def check_input_validation(ctx: PhaseContext) -> None:
    """Dispatch on method: query probes for GET, body probes for POST/PUT."""
    if ctx.method == "GET":
        await check_query_params(ctx)
    elif ctx.method in ("POST", "PUT"):
        await check_body_payloads(ctx)
    else:
        ctx.session.add_result(
            ResultStatus.INFO,
            "Input Validation",
            f"Skipped: no input probes defined for {ctx.method}",
        )


async def check_query_params(ctx: PhaseContext) -> None:
    session = ctx.session

    for payload in XSS_PAYLOADS[:QUERY_PAYLOADS_PER_CORPUS]:
        response = await ctx.send(PHASE, with_query_param(ctx.url, "test", payload), "GET")
        if response is None:
            break
        if payload in response.body:
            session.add_finding(
                Severity.HIGH,
                "XSS Vulnerability",
                "Unsanitized input reflected in response",
                "Sanitize and encode all user input",
            )
            break

    for payload in SQL_PAYLOADS[:QUERY_PAYLOADS_PER_CORPUS]:
        response = await ctx.send(PHASE, with_query_param(ctx.url, "id", payload), "GET")
        if response is None:
            break
        if any(marker in response.body for marker in SQL_ERROR_MARKERS):
            session.add_finding(
                Severity.CRITICAL,
                "SQL Injection",
                "SQL error messages exposed",
                "Use parameterized queries",
            )
            break

    for payload in PATH_TRAVERSAL_PAYLOADS[:QUERY_PAYLOADS_PER_CORPUS]:
        response = await ctx.send(PHASE, with_query_param(ctx.url, "file", payload), "GET")
        if response is None:
            break
        if any(marker in response.body for marker in TRAVERSAL_MARKERS):
            session.add_finding(
                Severity.CRITICAL,
                "Path Traversal",
                "Directory traversal possible",
                "Validate and sanitize file paths",
            )
            break


async def check_body_payloads(ctx: PhaseContext) -> None:
    session = ctx.session
    json_payloads = [
        {"test": XSS_PAYLOADS[0]},
        {"id": SQL_PAYLOADS[0]},
        {"filter": NOSQL_PAYLOADS[0]},
    ]

    for payload in json_payloads:
        response = await ctx.send(PHASE, ctx.url, ctx.method, body=json.dumps(payload))
        if response is None:
            break
        if response.status_code == 500:
            session.add_finding(
                Severity.MEDIUM,
                "Insufficient Input Validation",
                "Server error on malformed input",
                "Implement proper input validation",
            )
            break

    oversized = json.dumps({"data": "A" * OVERSIZED_PAYLOAD_CHARS})
    response = await ctx.send(PHASE, ctx.url, ctx.method, body=oversized)
    if response is not None and response.status_code in (200, 201):
        session.add_finding(
            Severity.LOW,
            "No Payload Size Limit",
            "Endpoint accepts very large payloads",
            "Implement payload size limits",
        )
