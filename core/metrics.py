"""
Prometheus metrics for the partner network service.

Custom metrics for business logic and performance monitoring.
"""

from prometheus_client import Counter, Histogram

# HTTP metrics
http_requests_total = Counter(
    "http_requests_total",
    "Total HTTP requests",
    ["method", "endpoint", "status_code"],
)

http_request_duration_seconds = Histogram(
    "http_request_duration_seconds",
    "HTTP request duration in seconds",
    ["method", "endpoint"],
    buckets=[0.01, 0.05, 0.1, 0.5, 1.0, 2.0, 5.0, 10.0],
)

# Activation metrics
status_toggles_total = Counter(
    "status_toggles_total",
    "Total accepted status toggles",
    ["entity_kind", "new_state"],
)

activations_blocked_total = Counter(
    "activations_blocked_total",
    "Total activations refused because of an inactive ancestor",
    ["entity_kind", "blocker_kind"],
)

# Customer access metrics
access_tokens_redeemed_total = Counter(
    "access_tokens_redeemed_total",
    "Total first reads of customer access tokens",
)

# Rate limiting
rate_limited_requests_total = Counter(
    "rate_limited_requests_total",
    "Total requests rejected by the rate limiter",
    ["endpoint"],
)

# Error metrics
errors_total = Counter(
    "errors_total",
    "Total errors",
    ["error_type", "endpoint"],
)
