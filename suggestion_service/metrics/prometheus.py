# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Prometheus metrics — single source of truth for all metric objects.
Imported by services and middleware. Never instantiated in controllers.
"""

from prometheus_client import Counter, Gauge, Histogram

# ── HTTP Metrics (used by middleware) ──
REQUEST_COUNT = Counter(
    "suggestion_requests_total",
    "Total HTTP requests to suggestion service",
    ["method", "endpoint", "status"],
)
REQUEST_LATENCY = Histogram(
    "suggestion_request_duration_seconds",
    "Request latency in seconds",
    ["method", "endpoint"],
)
HTTP_ERRORS = Counter(
    "suggestion_http_errors_total",
    "Total HTTP error responses",
    ["method", "endpoint", "status"],
)

# ── Business Metrics (updated by service layer only) ──
SUGGESTIONS_CREATED = Counter(
    "suggestions_created_total",
    "Total suggested names accepted",
)
SUGGESTIONS_DELETED = Counter(
    "suggestions_deleted_total",
    "Total suggested names deleted",
)
SUGGESTIONS_REJECTED = Counter(
    "suggestions_rejected_total",
    "Total suggestion requests rejected",
    ["reason"],
)
SUGGESTIONS_STORED = Gauge(
    "suggestions_stored",
    "Number of suggested names currently stored",
)
