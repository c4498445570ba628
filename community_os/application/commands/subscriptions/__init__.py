"""Subscription commands."""

from .create_subscription import CreateSubscriptionCommand, CreateSubscriptionHandler
from .cancel_subscription import CancelSubscriptionCommand, CancelSubscriptionHandler
from .handle_stripe_webhook import HandleStripeWebhookCommand, HandleStripeWebhookHandler

__all__ = [
    "CreateSubscriptionCommand",
    "CreateSubscriptionHandler",
    "CancelSubscriptionCommand",
    "CancelSubscriptionHandler",
    "HandleStripeWebhookCommand",
    "HandleStripeWebhookHandler",
]
