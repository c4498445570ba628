"""
Payment Gateway Port - What the billing use cases need from a payment provider.

Implementations:
- infrastructure/payments/stripe_gateway.py   (Stripe REST API)
- infrastructure/payments/offline_gateway.py  (no API key configured)
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional


class PaymentGatewayError(Exception):
    """Provider call failed or returned an unusable response."""


class InvalidWebhookSignature(Exception):
    """Webhook payload could not be authenticated."""


@dataclass(frozen=True)
class CheckoutSessionRequest:
    price_id: str
    user_id: str
    community_id: str
    tier_id: str
    interval: str
    success_url: str
    cancel_url: str
    trial_days: int
    customer_email: Optional[str] = None
    # Local coupon id, echoed back in webhook metadata
    coupon_id: Optional[str] = None
    stripe_coupon_id: Optional[str] = None


@dataclass(frozen=True)
class CheckoutSession:
    session_id: str
    url: str


@dataclass(frozen=True)
class WebhookEvent:
    id: str
    type: str
    data: dict[str, Any] = field(default_factory=dict)


class PaymentGateway(ABC):
    @abstractmethod
    async def create_product(self, name: str, description: str) -> str:
        """Returns the provider product id."""
        ...

    @abstractmethod
    async def create_price(self, product_id: str, amount: int, interval: str) -> str:
        """Recurring price in cents; interval is MONTHLY or ANNUAL."""
        ...

    @abstractmethod
    async def create_coupon(
        self,
        code: str,
        discount_type: str,
        discount_value: int,
        expires_at: Optional[datetime] = None,
        max_uses: Optional[int] = None,
    ) -> str:
        """Mirror a coupon; expiry and use limits carry over to the provider copy."""
        ...

    @abstractmethod
    async def create_checkout_session(
        self, request: CheckoutSessionRequest
    ) -> CheckoutSession: ...

    @abstractmethod
    def construct_webhook_event(self, payload: bytes, signature: str) -> WebhookEvent:
        """Authenticate and parse a webhook body. Raises InvalidWebhookSignature."""
        ...

    @abstractmethod
    async def cancel_at_period_end(self, subscription_id: str) -> None:
        """Stop renewal of a provider subscription once its current period ends."""
        ...
