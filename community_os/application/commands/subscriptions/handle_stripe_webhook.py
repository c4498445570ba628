"""
Stripe webhook processing.

EVENTS:
    checkout.session.completed      create the TRIALING subscription (or attach gateway ids)
    customer.subscription.updated   sync status, renewal period and cancel_at_period_end
    customer.subscription.deleted   cancel immediately
    invoice.payment_succeeded       PAST_DUE -> ACTIVE
    invoice.payment_failed          -> PAST_DUE

Anything else is acknowledged and counted as ignored, so the gateway does
not keep retrying it.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Optional

from community_os.application.common.errors import translate_errors
from community_os.application.common.interfaces import Command, CommandHandler
from community_os.application.dto import WebhookReceiptDto
from community_os.application.errors import SubscriptionError, SubscriptionErrorCode
from community_os.config.settings import Config
from community_os.domain.entities import BillingInterval, Subscription, SubscriptionStatus
from community_os.domain.ports.repositories import CouponRepository, SubscriptionRepository
from community_os.domain.ports.services import (
    InvalidWebhookSignature,
    PaymentGateway,
    WebhookEvent,
)
from community_os.observability.metrics import WebhookOutcome, increment_webhook_event

logger = logging.getLogger(__name__)

STRIPE_STATUS_MAP = {
    "active": SubscriptionStatus.ACTIVE,
    "trialing": SubscriptionStatus.TRIALING,
    "past_due": SubscriptionStatus.PAST_DUE,
    "canceled": SubscriptionStatus.CANCELLED,
}


@dataclass(frozen=True)
class HandleStripeWebhookCommand(Command[WebhookReceiptDto]):
    payload: bytes
    signature: str


class HandleStripeWebhookHandler(CommandHandler[WebhookReceiptDto]):
    def __init__(
        self,
        subscription_repository: SubscriptionRepository,
        coupon_repository: CouponRepository,
        payment_gateway: PaymentGateway,
    ):
        self._subscription_repository = subscription_repository
        self._coupon_repository = coupon_repository
        self._payment_gateway = payment_gateway
        self._handlers = {
            "checkout.session.completed": self._on_checkout_completed,
            "customer.subscription.updated": self._on_subscription_updated,
            "customer.subscription.deleted": self._on_subscription_deleted,
            "invoice.payment_succeeded": self._on_payment_succeeded,
            "invoice.payment_failed": self._on_payment_failed,
        }

    @translate_errors(SubscriptionError)
    async def execute(self, command: HandleStripeWebhookCommand) -> WebhookReceiptDto:
        if not command.signature:
            raise SubscriptionError(
                SubscriptionErrorCode.INVALID_SIGNATURE, "Missing Stripe-Signature header"
            )
        try:
            event = self._payment_gateway.construct_webhook_event(
                command.payload, command.signature
            )
        except InvalidWebhookSignature as exc:
            logger.warning(f"[WEBHOOK] Rejected payload: {exc}")
            raise SubscriptionError(SubscriptionErrorCode.INVALID_SIGNATURE, str(exc)) from exc

        handler = self._handlers.get(event.type)
        if handler is None:
            logger.info(f"[WEBHOOK] Unhandled event type {event.type} ({event.id})")
            increment_webhook_event(event.type, WebhookOutcome.IGNORED)
            return WebhookReceiptDto(received=True, event_type=event.type)

        try:
            processed = await handler(event.data.get("object", {}))
        except Exception:
            increment_webhook_event(event.type, WebhookOutcome.FAILED)
            raise

        outcome = WebhookOutcome.PROCESSED if processed else WebhookOutcome.IGNORED
        increment_webhook_event(event.type, outcome)
        logger.info(f"[WEBHOOK] {event.type} ({event.id}): {outcome}")
        return WebhookReceiptDto(received=True, event_type=event.type)

    async def _on_checkout_completed(self, session: dict[str, Any]) -> bool:
        metadata = session.get("metadata") or {}
        user_id = metadata.get("user_id")
        community_id = metadata.get("community_id")
        tier_id = metadata.get("tier_id")
        if not (user_id and community_id and tier_id):
            logger.warning("[WEBHOOK] Checkout session without subscription metadata")
            return False

        stripe_subscription_id = session.get("subscription")
        stripe_customer_id = session.get("customer")
        existing = await self._subscription_repository.find_by_user_and_community(
            user_id, community_id
        )
        if existing is not None and not existing.is_archived:
            existing.update_stripe_ids(stripe_subscription_id, stripe_customer_id)
            await self._subscription_repository.update(existing)
        else:
            subscription = Subscription.start_trial(
                user_id=user_id,
                community_id=community_id,
                payment_tier_id=tier_id,
                interval=BillingInterval(metadata.get("interval", BillingInterval.MONTHLY.value)),
                trial_days=Config.CHECKOUT_TRIAL_DAYS,
                stripe_subscription_id=stripe_subscription_id,
                stripe_customer_id=stripe_customer_id,
            )
            await self._subscription_repository.create(subscription)

        coupon_id = metadata.get("coupon_id")
        if coupon_id:
            await self._redeem_coupon(coupon_id)
        return True

    async def _redeem_coupon(self, coupon_id: str) -> None:
        coupon = await self._coupon_repository.find_by_id(coupon_id)
        if coupon is None or not coupon.is_available():
            logger.warning(f"[WEBHOOK] Coupon {coupon_id} could not be redeemed")
            return
        coupon.use()
        await self._coupon_repository.update(coupon)

    async def _on_subscription_updated(self, data: dict[str, Any]) -> bool:
        subscription = await self._find(data.get("id"))
        if subscription is None:
            return False

        status = STRIPE_STATUS_MAP.get(data.get("status", ""))
        if status == SubscriptionStatus.CANCELLED:
            if subscription.status != SubscriptionStatus.CANCELLED:
                subscription.cancel_immediately()
                await self._subscription_repository.update(subscription)
            return True

        period_end = _from_timestamp(data.get("current_period_end"))
        if period_end and period_end > subscription.current_period_end:
            subscription.renew_period(period_end)
        if status is not None:
            subscription.update_status(status)
        subscription.schedule_cancellation(bool(data.get("cancel_at_period_end", False)))
        await self._subscription_repository.update(subscription)
        return True

    async def _on_subscription_deleted(self, data: dict[str, Any]) -> bool:
        subscription = await self._find(data.get("id"))
        if subscription is None or subscription.status == SubscriptionStatus.CANCELLED:
            return False
        subscription.cancel_immediately()
        await self._subscription_repository.update(subscription)
        return True

    async def _on_payment_succeeded(self, invoice: dict[str, Any]) -> bool:
        subscription = await self._find(invoice.get("subscription"))
        if subscription is None or subscription.status != SubscriptionStatus.PAST_DUE:
            return False
        subscription.activate()
        await self._subscription_repository.update(subscription)
        return True

    async def _on_payment_failed(self, invoice: dict[str, Any]) -> bool:
        subscription = await self._find(invoice.get("subscription"))
        if subscription is None or subscription.status == SubscriptionStatus.CANCELLED:
            return False
        subscription.mark_past_due()
        await self._subscription_repository.update(subscription)
        return True

    async def _find(self, stripe_subscription_id: Optional[str]) -> Optional[Subscription]:
        if not stripe_subscription_id:
            return None
        subscription = await self._subscription_repository.find_by_stripe_subscription_id(
            stripe_subscription_id
        )
        if subscription is None:
            logger.warning(f"[WEBHOOK] Unknown gateway subscription {stripe_subscription_id}")
        return subscription


def _from_timestamp(value: Any) -> Optional[datetime]:
    if value is None:
        return None
    return datetime.fromtimestamp(int(value), tz=timezone.utc)
