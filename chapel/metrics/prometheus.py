# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Prometheus metrics — single source of truth for all metric objects.
Imported by services, repositories and middleware. Never instantiated in controllers.
"""

from prometheus_client import Counter, Histogram

# ── HTTP Metrics (used by middleware) ──
REQUEST_COUNT = Counter(
    "chapel_requests_total",
    "Total HTTP requests to the chapel rotation service",
    ["method", "endpoint", "status"],
)
REQUEST_LATENCY = Histogram(
    "chapel_request_duration_seconds",
    "Request latency in seconds",
    ["method", "endpoint"],
)
HTTP_ERRORS = Counter(
    "chapel_http_errors_total",
    "Total HTTP error responses",
    ["method", "endpoint", "status"],
)

# ── Business Metrics (updated by service layer only) ──
MEMBERS_CREATED = Counter(
    "chapel_members_created_total",
    "Total rotation members created",
)
MEMBERS_DELETED = Counter(
    "chapel_members_deleted_total",
    "Total rotation members deleted",
)
ROTATION_REORDERS = Counter(
    "chapel_rotation_reorders_total",
    "Total rotation reorder operations",
)
HANDOFFS_TOTAL = Counter(
    "chapel_handoffs_total",
    "Total chapel hand-offs recorded",
    ["archived"],
)
CALENDAR_PROJECTIONS = Counter(
    "chapel_calendar_projections_total",
    "Total calendar projections computed",
)
NOTIFICATIONS_SENT = Counter(
    "chapel_notifications_sent_total",
    "Total hand-off notices sent to the notification service",
    ["status"],
)

# ── Storage Metrics (updated by repositories) ──
STORAGE_ERRORS = Counter(
    "chapel_storage_errors_total",
    "Database errors by operation kind",
    ["operation"],
)
