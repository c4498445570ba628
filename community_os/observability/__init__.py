"""Observability package for the Community OS API."""

from community_os.observability.metrics import (
    observe_request_latency,
    increment_use_case_error,
    increment_notification,
    increment_webhook_event,
    get_metrics_content,
    WebhookOutcome,
)

__all__ = [
    "get_metrics_content",
    "observe_request_latency",
    "increment_use_case_error",
    "increment_notification",
    "increment_webhook_event",
    "WebhookOutcome",
]
