import logging
import uuid
from datetime import datetime
from typing import Optional

from community_os.config.settings import Config
from community_os.domain.ports.services import (
    CheckoutSession,
    CheckoutSessionRequest,
    PaymentGateway,
    WebhookEvent,
)
from community_os.infrastructure.payments.signature import verify_stripe_signature

logger = logging.getLogger(__name__)


def _mint(prefix: str) -> str:
    return f"{prefix}_offline_{uuid.uuid4().hex[:24]}"


class OfflinePaymentGateway(PaymentGateway):
    """
    Used when no Stripe key is configured.

    Product, price and coupon ids are minted locally and checkout returns
    the success URL directly. Webhooks are still signature-checked with
    STRIPE_WEBHOOK_SECRET so the webhook flow can be exercised end to end.
    """

    def __init__(
        self,
        webhook_secret: str = Config.STRIPE_WEBHOOK_SECRET,
        webhook_tolerance: int = Config.STRIPE_WEBHOOK_TOLERANCE,
    ):
        self._webhook_secret = webhook_secret
        self._webhook_tolerance = webhook_tolerance

    async def create_product(self, name: str, description: str) -> str:
        return _mint("prod")

    async def create_price(self, product_id: str, amount: int, interval: str) -> str:
        return _mint("price")

    async def create_coupon(
        self,
        code: str,
        discount_type: str,
        discount_value: int,
        expires_at: Optional[datetime] = None,
        max_uses: Optional[int] = None,
    ) -> str:
        return _mint("coupon")

    async def create_checkout_session(
        self, request: CheckoutSessionRequest
    ) -> CheckoutSession:
        session_id = _mint("cs")
        logger.info(
            f"[PAYMENTS] Offline checkout {session_id} for user {request.user_id} "
            f"tier {request.tier_id}"
        )
        separator = "&" if "?" in request.success_url else "?"
        return CheckoutSession(
            session_id=session_id,
            url=f"{request.success_url}{separator}session_id={session_id}",
        )

    def construct_webhook_event(self, payload: bytes, signature: str) -> WebhookEvent:
        return verify_stripe_signature(
            payload, signature, self._webhook_secret, self._webhook_tolerance
        )

    async def cancel_at_period_end(self, subscription_id: str) -> None:
        logger.info(f"[PAYMENTS] Offline cancel_at_period_end for {subscription_id}")
