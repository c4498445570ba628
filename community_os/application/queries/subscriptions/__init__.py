"""Subscription queries."""

from .get_subscription import GetSubscriptionQuery, GetSubscriptionHandler

__all__ = ["GetSubscriptionQuery", "GetSubscriptionHandler"]
