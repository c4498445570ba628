"""
Create Subscription Command - opens a gateway checkout session.

The subscription row itself is written when the gateway reports
checkout.session.completed (see handle_stripe_webhook.py).
"""

import logging
from dataclasses import dataclass
from typing import Optional

from community_os.application.common.errors import translate_errors
from community_os.application.common.interfaces import Command, CommandHandler
from community_os.application.dto import CheckoutSessionDto
from community_os.application.errors import SubscriptionError, SubscriptionErrorCode
from community_os.config.settings import Config
from community_os.domain.entities import BillingInterval
from community_os.domain.entities.coupon import normalize_code
from community_os.domain.ports.repositories import (
    CouponRepository,
    PaymentTierRepository,
    SubscriptionRepository,
    UserRepository,
)
from community_os.domain.ports.services import (
    CheckoutSessionRequest,
    PaymentGateway,
    PaymentGatewayError,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CreateSubscriptionCommand(Command[CheckoutSessionDto]):
    user_id: str
    community_id: str
    tier_id: str
    interval: str
    success_url: str
    cancel_url: str
    coupon_code: Optional[str] = None


class CreateSubscriptionHandler(CommandHandler[CheckoutSessionDto]):
    def __init__(
        self,
        subscription_repository: SubscriptionRepository,
        payment_tier_repository: PaymentTierRepository,
        coupon_repository: CouponRepository,
        user_repository: UserRepository,
        payment_gateway: PaymentGateway,
    ):
        self._subscription_repository = subscription_repository
        self._payment_tier_repository = payment_tier_repository
        self._coupon_repository = coupon_repository
        self._user_repository = user_repository
        self._payment_gateway = payment_gateway

    @translate_errors(SubscriptionError)
    async def execute(self, command: CreateSubscriptionCommand) -> CheckoutSessionDto:
        if not command.user_id or not command.community_id or not command.tier_id:
            raise SubscriptionError(
                SubscriptionErrorCode.INVALID_INPUT, "User, community and tier are required"
            )
        try:
            interval = BillingInterval(command.interval)
        except ValueError:
            raise SubscriptionError(
                SubscriptionErrorCode.INVALID_INPUT, "Interval must be MONTHLY or ANNUAL"
            )

        user = await self._user_repository.find_by_id(command.user_id)
        if user is None:
            raise SubscriptionError(SubscriptionErrorCode.USER_NOT_FOUND)

        tier = await self._payment_tier_repository.find_by_id(command.tier_id)
        if tier is None or tier.is_archived or tier.community_id != command.community_id:
            raise SubscriptionError(SubscriptionErrorCode.TIER_NOT_FOUND)
        if not tier.is_active:
            raise SubscriptionError(SubscriptionErrorCode.TIER_NOT_ACTIVE)

        existing = await self._subscription_repository.find_by_user_and_community(
            command.user_id, command.community_id
        )
        if existing is not None and existing.is_active:
            raise SubscriptionError(SubscriptionErrorCode.ALREADY_SUBSCRIBED)

        price_id = tier.stripe_price_for(interval.value)
        if not price_id:
            raise SubscriptionError(
                SubscriptionErrorCode.STRIPE_ERROR,
                f"Tier has no {interval.value.lower()} price configured",
            )

        coupon_id = None
        stripe_coupon_id = None
        if command.coupon_code and command.coupon_code.strip():
            coupon = await self._coupon_repository.find_by_code(
                command.community_id, normalize_code(command.coupon_code)
            )
            if coupon is None or not coupon.is_available():
                raise SubscriptionError(
                    SubscriptionErrorCode.INVALID_INPUT, "Coupon is not valid for this community"
                )
            coupon_id = coupon.id
            stripe_coupon_id = coupon.stripe_coupon_id

        request = CheckoutSessionRequest(
            price_id=price_id,
            user_id=user.id,
            community_id=command.community_id,
            tier_id=tier.id,
            interval=interval.value,
            success_url=command.success_url,
            cancel_url=command.cancel_url,
            trial_days=Config.CHECKOUT_TRIAL_DAYS,
            customer_email=user.email.value,
            coupon_id=coupon_id,
            stripe_coupon_id=stripe_coupon_id,
        )
        try:
            session = await self._payment_gateway.create_checkout_session(request)
        except PaymentGatewayError as exc:
            logger.error(f"[PAYMENTS] Checkout session failed for user {user.id}: {exc}")
            raise SubscriptionError(SubscriptionErrorCode.CHECKOUT_FAILED, str(exc)) from exc

        logger.info(f"[PAYMENTS] Checkout session {session.session_id} opened for user {user.id}")
        return CheckoutSessionDto(checkout_url=session.url, session_id=session.session_id)
