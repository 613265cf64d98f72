"""Ordered phases of the vulnerability test pipeline."""

from .auth import basic_auth_header, check_authentication
from .base import Phase, PhaseContext
from .headers import EXPECTED_HEADERS, check_security_headers
from .input_validation import (
    check_body_payloads,
    check_input_validation,
    check_query_params,
    with_query_param,
)
from .methods import PROBED_METHODS, check_http_methods
from .rate_limit import check_rate_limiting
from .transport import check_transport

DEFAULT_PHASES: tuple[Phase, ...] = (
    Phase("transport", "Basic Security", check_transport),
    Phase("headers", "Security Headers", check_security_headers),
    Phase("authentication", "Authentication", check_authentication),
    Phase("rate_limiting", "Rate Limiting", check_rate_limiting),
    Phase("input_validation", "Input Validation", check_input_validation),
    Phase("http_methods", "HTTP Methods", check_http_methods),
)

__all__ = [
    "DEFAULT_PHASES",
    "EXPECTED_HEADERS",
    "PROBED_METHODS",
    "Phase",
    "PhaseContext",
    "basic_auth_header",
    "check_authentication",
    "check_body_payloads",
    "check_http_methods",
    "check_input_validation",
    "check_query_params",
    "check_rate_limiting",
    "check_security_headers",
    "check_transport",
    "with_query_param",
]
