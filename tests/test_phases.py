"""Tests for the individual vulnerability test phases."""

import base64

import httpx
import respx
from httpx import Response

from secprobe.modules.vulntest import ResultStatus, Severity
from secprobe.modules.vulntest.payloads import XSS_PAYLOADS
from secprobe.modules.vulntest.phases import (
    EXPECTED_HEADERS,
    basic_auth_header,
    check_authentication,
    check_http_methods,
    check_input_validation,
    check_rate_limiting,
    check_security_headers,
    check_transport,
    with_query_param,
)

API = "https://api.example.com/users"

HARDENED_HEADERS = {
    "Strict-Transport-Security": "max-age=63072000",
    "X-Frame-Options": "DENY",
    "X-Content-Type-Options": "nosniff",
    "Content-Security-Policy": "default-src 'self'",
    "X-XSS-Protection": "1; mode=block",
    "Referrer-Policy": "no-referrer",
}


def kinds(session) -> list[str]:
    return [finding.kind for finding in session.findings]


class TestTransportPhase:
    @respx.mock
    async def test_plain_http_is_high(self, phase_context):
        respx.get("http://api.example.com/users").mock(return_value=Response(200))
        ctx = phase_context("http://api.example.com/users")

        await check_transport(ctx)

        assert kinds(ctx.session) == ["Insecure Protocol"]
        assert ctx.session.findings[0].severity is Severity.HIGH
        assert ctx.session.results[-1].detail == "Response: 200"

    @respx.mock
    async def test_https_with_disclosing_headers(self, phase_context):
        respx.get(API).mock(
            return_value=Response(200, headers={"Server": "nginx/1.18", "X-Powered-By": "PHP/8"})
        )
        ctx = phase_context()

        await check_transport(ctx)

        assert kinds(ctx.session) == ["Server Header Exposed", "Technology Stack Exposed"]
        assert all(f.severity is Severity.LOW for f in ctx.session.findings)
        assert ctx.session.results[0].status is ResultStatus.PASS

    @respx.mock
    async def test_unreachable_records_error_only(self, phase_context):
        respx.get(API).mock(side_effect=httpx.ConnectError("refused"))
        ctx = phase_context()

        await check_transport(ctx)

        assert ctx.session.findings == []
        assert len(ctx.session.errors) == 1
        assert ctx.session.errors[0].phase == "transport"


class TestSecurityHeadersPhase:
    @respx.mock
    async def test_all_headers_missing(self, phase_context):
        respx.get(API).mock(return_value=Response(200))
        ctx = phase_context()

        await check_security_headers(ctx)

        assert len(ctx.session.findings) == len(EXPECTED_HEADERS)
        severities = {f.kind: f.severity for f in ctx.session.findings}
        assert severities["Missing HSTS"] is Severity.HIGH
        assert severities["Missing CSP"] is Severity.HIGH
        assert severities["Missing X-Frame-Options"] is Severity.MEDIUM
        assert severities["Missing Referrer-Policy"] is Severity.LOW

    @respx.mock
    async def test_hardened_response_passes(self, phase_context):
        respx.get(API).mock(return_value=Response(200, headers=HARDENED_HEADERS))
        ctx = phase_context()

        await check_security_headers(ctx)

        assert ctx.session.findings == []
        assert len(ctx.session.results) == 6
        assert all(r.status is ResultStatus.PASS for r in ctx.session.results)

    @respx.mock
    async def test_wildcard_cors(self, phase_context):
        respx.get(API).mock(
            return_value=Response(
                200, headers={**HARDENED_HEADERS, "Access-Control-Allow-Origin": "*"}
            )
        )
        ctx = phase_context()

        await check_security_headers(ctx)

        assert kinds(ctx.session) == ["Open CORS Policy"]
        assert ctx.session.findings[0].severity is Severity.MEDIUM

    @respx.mock
    async def test_headers_phase_uses_get_even_for_post(self, phase_context):
        route = respx.get(API).mock(return_value=Response(200, headers=HARDENED_HEADERS))
        ctx = phase_context(method="POST")

        await check_security_headers(ctx)

        assert route.call_count == 1


class TestAuthenticationPhase:
    @respx.mock
    async def test_open_endpoint_emits_one_high(self, phase_context):
        respx.get(API).mock(return_value=Response(200))
        ctx = phase_context()

        await check_authentication(ctx)

        highs = [f for f in ctx.session.findings if f.severity is Severity.HIGH]
        assert [f.kind for f in highs] == ["No Authentication Required"]

    @respx.mock
    async def test_protected_endpoint_passes(self, phase_context):
        route = respx.get(API).mock(return_value=Response(401))
        ctx = phase_context()

        await check_authentication(ctx)

        assert ctx.session.findings == []
        assert ctx.session.results[0].name == "Authentication Required"
        # baseline + invalid token + three default credential attempts
        assert route.call_count == 5

    @respx.mock
    async def test_invalid_token_accepted_is_critical(self, phase_context):
        def handler(request: httpx.Request) -> Response:
            auth = request.headers.get("Authorization", "")
            return Response(200 if auth.startswith("Bearer ") else 401)

        respx.get(API).mock(side_effect=handler)
        ctx = phase_context()

        await check_authentication(ctx)

        assert kinds(ctx.session) == ["Broken Authentication"]
        assert ctx.session.findings[0].severity is Severity.CRITICAL

    @respx.mock
    async def test_default_credentials_stop_at_first_acceptance(self, phase_context):
        accepted = basic_auth_header("admin", "password")

        def handler(request: httpx.Request) -> Response:
            return Response(200 if request.headers.get("Authorization") == accepted else 401)

        route = respx.get(API).mock(side_effect=handler)
        ctx = phase_context()

        await check_authentication(ctx)

        assert kinds(ctx.session) == ["Default Credentials"]
        assert "admin/password" in ctx.session.findings[0].detail
        basic_attempts = [
            call
            for call in route.calls
            if call.request.headers.get("Authorization", "").startswith("Basic ")
        ]
        assert len(basic_attempts) == 2

    def test_basic_auth_header_encoding(self):
        header = basic_auth_header("root", "root")
        assert header == "Basic " + base64.b64encode(b"root:root").decode()


class TestRateLimitingPhase:
    @respx.mock
    async def test_fifteen_successes_is_medium(self, phase_context):
        route = respx.get(API).mock(return_value=Response(200))
        ctx = phase_context()

        await check_rate_limiting(ctx)

        assert route.call_count == 15
        assert kinds(ctx.session) == ["No Rate Limiting"]
        assert ctx.session.findings[0].severity is Severity.MEDIUM

    @respx.mock
    async def test_429_on_sixth_request_stops(self, phase_context):
        count = 0

        def handler(request: httpx.Request) -> Response:
            nonlocal count
            count += 1
            return Response(429 if count == 6 else 200)

        route = respx.get(API).mock(side_effect=handler)
        ctx = phase_context()

        await check_rate_limiting(ctx)

        assert route.call_count == 6
        assert ctx.session.findings == []
        assert ctx.session.results[0].status is ResultStatus.PASS
        assert ctx.session.results[0].name == "Rate Limiting"

    @respx.mock
    async def test_requests_are_spaced(self, phase_context, recording_sleep, sleep_calls):
        respx.get(API).mock(return_value=Response(200))
        ctx = phase_context()
        ctx.sleep = recording_sleep

        await check_rate_limiting(ctx)

        assert sleep_calls == [0.1] * 14

    @respx.mock
    async def test_non_200_without_429_is_silent(self, phase_context):
        respx.get(API).mock(return_value=Response(404))
        ctx = phase_context()

        await check_rate_limiting(ctx)

        assert ctx.session.findings == []
        assert ctx.session.results == []


class TestInputValidationPhase:
    @respx.mock
    async def test_reflected_xss_reported_once(self, phase_context):
        def handler(request: httpx.Request) -> Response:
            return Response(200, text=f"<p>{request.url.params.get('test', '')}</p>")

        route = respx.get(host="api.example.com").mock(side_effect=handler)
        ctx = phase_context()

        await check_input_validation(ctx)

        assert kinds(ctx.session) == ["XSS Vulnerability"]
        assert ctx.session.findings[0].severity is Severity.HIGH
        xss_probes = [call for call in route.calls if "test" in call.request.url.params]
        assert len(xss_probes) == 1
        assert xss_probes[0].request.url.params["test"] == XSS_PAYLOADS[0]

    @respx.mock
    async def test_sql_error_leak_is_critical(self, phase_context):
        def handler(request: httpx.Request) -> Response:
            if "id" in request.url.params:
                return Response(500, text="You have an error in your SQL syntax")
            return Response(200, text="ok")

        respx.get(host="api.example.com").mock(side_effect=handler)
        ctx = phase_context()

        await check_input_validation(ctx)

        assert kinds(ctx.session) == ["SQL Injection"]
        assert ctx.session.findings[0].severity is Severity.CRITICAL

    @respx.mock
    async def test_path_traversal_marker(self, phase_context):
        def handler(request: httpx.Request) -> Response:
            if "file" in request.url.params:
                return Response(200, text="root:x:0:0:root:/root:/bin/bash")
            return Response(200, text="ok")

        respx.get(host="api.example.com").mock(side_effect=handler)
        ctx = phase_context()

        await check_input_validation(ctx)

        assert kinds(ctx.session) == ["Path Traversal"]

    @respx.mock
    async def test_clean_get_endpoint_uses_two_payloads_per_corpus(self, phase_context):
        route = respx.get(host="api.example.com").mock(return_value=Response(200, text="ok"))
        ctx = phase_context()

        await check_input_validation(ctx)

        assert ctx.session.findings == []
        assert route.call_count == 6

    @respx.mock
    async def test_post_server_error_and_oversized_payload(self, phase_context):
        def handler(request: httpx.Request) -> Response:
            if len(request.content) > 1_000_000:
                return Response(201)
            return Response(500)

        route = respx.post(API).mock(side_effect=handler)
        ctx = phase_context(method="POST")

        await check_input_validation(ctx)

        assert kinds(ctx.session) == ["Insufficient Input Validation", "No Payload Size Limit"]
        assert [f.severity for f in ctx.session.findings] == [Severity.MEDIUM, Severity.LOW]
        # first JSON probe hits the 500, then the oversized probe
        assert route.call_count == 2

    @respx.mock
    async def test_put_rejecting_large_payload(self, phase_context):
        def handler(request: httpx.Request) -> Response:
            return Response(413 if len(request.content) > 1_000_000 else 400)

        route = respx.put(API).mock(side_effect=handler)
        ctx = phase_context(method="PUT")

        await check_input_validation(ctx)

        assert ctx.session.findings == []
        assert route.call_count == 4

    async def test_other_methods_are_skipped(self, phase_context):
        ctx = phase_context(method="DELETE")

        await check_input_validation(ctx)

        assert ctx.session.findings == []
        assert ctx.session.results[0].status is ResultStatus.INFO

    def test_with_query_param(self):
        assert with_query_param("https://x.io/a", "id", "1 2") == "https://x.io/a?id=1%202"
        assert with_query_param("https://x.io/a?b=1", "id", "'") == "https://x.io/a?b=1&id=%27"


class TestHTTPMethodsPhase:
    @respx.mock
    async def test_trace_enabled_is_low(self, phase_context):
        respx.route(host="api.example.com").mock(return_value=Response(200))
        ctx = phase_context()

        await check_http_methods(ctx)

        assert kinds(ctx.session) == ["TRACE Method Enabled"]
        assert ctx.session.findings[0].severity is Severity.LOW
        assert ctx.session.results[0].detail == "Methods: OPTIONS, HEAD, PUT, DELETE, PATCH, TRACE"

    @respx.mock
    async def test_trace_rejected(self, phase_context):
        def handler(request: httpx.Request) -> Response:
            if request.method in ("TRACE", "DELETE"):
                return Response(405)
            if request.method == "PATCH":
                return Response(501)
            return Response(200)

        respx.route(host="api.example.com").mock(side_effect=handler)
        ctx = phase_context()

        await check_http_methods(ctx)

        assert ctx.session.findings == []
        assert ctx.session.results[0].detail == "Methods: OPTIONS, HEAD, PUT"

    @respx.mock
    async def test_failed_probes_are_not_counted_as_allowed(self, phase_context):
        respx.route(host="api.example.com").mock(side_effect=httpx.ConnectError("down"))
        ctx = phase_context()

        await check_http_methods(ctx)

        assert ctx.session.findings == []
        assert ctx.session.results == []
        assert len(ctx.session.errors) == 6
