"""Prometheus metrics for the fake OAuth server.

Every collector lives here so there is one inventory of what the service
measures.  HTTP-level metrics are fed by MetricsMiddleware; the flow
counters are incremented by the handlers in fakeauth/services/ at the
point where each step completes.

A client integration test suite can scrape /metrics before and after a
run to confirm it walked every step (authorize → consent → token →
refresh) the expected number of times.
"""

from __future__ import annotations

from prometheus_client import Counter, Gauge, Histogram

# ---------------------------------------------------------------------------
# HTTP metrics (populated by the MetricsMiddleware)
# ---------------------------------------------------------------------------

REQUEST_COUNT = Counter(
    "http_requests_total",
    "Total HTTP requests by method, endpoint, and status code",
    ["method", "endpoint", "status_code"],
)

REQUEST_DURATION = Histogram(
    "http_request_duration_seconds",
    "HTTP request duration in seconds",
    ["method", "endpoint"],
    # Handlers do no I/O; anything past 100ms points at the transport.
    buckets=[0.001, 0.0025, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0],
)

ACTIVE_REQUESTS = Gauge(
    "http_active_requests",
    "Number of HTTP requests currently being processed",
)

# ---------------------------------------------------------------------------
# Flow metrics
# ---------------------------------------------------------------------------

AUTHORIZATIONS = Counter(
    "fake_oauth_authorizations_total",
    "Authorization requests redirected to the consent page",
)

CONSENT_ACTIONS = Counter(
    "fake_oauth_consent_total",
    "Consent page interactions",
    ["action"],  # "shown" or "granted"
)

TOKENS_ISSUED = Counter(
    "fake_oauth_tokens_issued_total",
    "Token payloads returned by grant type",
    ["grant_type"],  # "authorization_code", "refresh_token" or "other"
)

WRONG_METHOD = Counter(
    "fake_oauth_wrong_method_total",
    "Requests answered with the plain-text wrong-method notice",
    ["endpoint"],
)
