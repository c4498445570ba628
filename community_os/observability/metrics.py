"""
Prometheus Metrics for the Community OS API.

DEPENDENCY:
    pip install prometheus-client

DATA FLOW:
    This file                  presentation/api/metrics.py         Observability Stack
    ─────────                  ────────────────────────────         ───────────────────
    Define metrics ──────────► /metrics endpoint ──────────────►   Prometheus ──► Grafana

METRIC TYPES:
    - Counter: Value only goes up (total count, e.g., use case errors)
    - Histogram: Distribution (for percentiles like P95, e.g., latency)
"""

from prometheus_client import (
    Histogram,
    Counter,
    generate_latest,
    CONTENT_TYPE_LATEST,
)


# =============================================================================
# METRICS DEFINITIONS
# =============================================================================
REQUEST_LATENCY = Histogram(
    "http_server_request_duration_seconds",  # must be the same name as grafana panel metric
    "Http request latency in seconds",
    ["method", "route", "http_status_code"],
    buckets=[0.01, 0.05, 0.1, 0.25, 0.5, 1, 2, 5, 10],  # in seconds
)

USE_CASE_ERRORS_TOTAL = Counter(
    "community_use_case_errors_total",
    "Total number of use case errors by feature and code",
    ["feature", "code"],
)

NOTIFICATIONS_TOTAL = Counter(
    "community_notifications_total",
    "Total number of notifications created by type",
    ["type"],
)

WEBHOOK_EVENTS_TOTAL = Counter(
    "community_webhook_events_total",
    "Total number of payment and identity webhook events by type and outcome",
    ["event_type", "outcome"],
)


# =============================================================================
# LABEL CONSTANTS (avoid hardcoding strings throughout codebase)
# =============================================================================
class WebhookOutcome:
    """Outcome labels for community_webhook_events_total."""

    PROCESSED = "processed"
    IGNORED = "ignored"
    FAILED = "failed"


# =============================================================================
# RECORDING FUNCTIONS
# =============================================================================
def observe_request_latency(method: str, route: str, status_code: int, duration: float):
    """Call to record request latency. Integration point: presentation/middleware.py MetricsMiddleware"""
    REQUEST_LATENCY.labels(
        method=method, route=route, http_status_code=str(status_code)
    ).observe(duration)


def increment_use_case_error(feature: str, code: str):
    """Integration point: fastapi_app.py ApplicationError handler"""
    USE_CASE_ERRORS_TOTAL.labels(feature=feature, code=code).inc()


def increment_notification(type: str):
    """Integration point: application/commands/notifications/create_notification.py"""
    NOTIFICATIONS_TOTAL.labels(type=type).inc()


def increment_webhook_event(event_type: str, outcome: str):
    """Integration points: handle_stripe_webhook.py, handle_identity_webhook.py"""
    WEBHOOK_EVENTS_TOTAL.labels(event_type=event_type, outcome=outcome).inc()


# =============================================================================
# HELPER FOR /metrics ENDPOINT
# =============================================================================
def get_metrics_content():
    """
    Generate Prometheus metrics output.

    Called by: presentation/api/metrics.py

    Returns:
        Tuple of (content_bytes, content_type_string)
    """
    return generate_latest(), CONTENT_TYPE_LATEST


# =============================================================================
# EXPORTS
# =============================================================================
__all__ = [
    "observe_request_latency",
    "increment_use_case_error",
    "increment_notification",
    "increment_webhook_event",
    "get_metrics_content",
    "WebhookOutcome",
]
