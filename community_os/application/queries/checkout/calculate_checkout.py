"""
Calculate Checkout Query - price preview for a tier, interval and optional coupon.

    discount = round(subtotal * pct / 100)   for PERCENTAGE
    discount = min(value, subtotal)          for FIXED_AMOUNT
    total    = max(0, subtotal - discount)
"""

from dataclasses import dataclass
from typing import Optional

from community_os.application.common.errors import translate_errors
from community_os.application.common.interfaces import Query, QueryHandler
from community_os.application.dto import CheckoutCalculationDto
from community_os.application.errors import CheckoutError, CheckoutErrorCode
from community_os.config.settings import Config
from community_os.domain.entities import BillingInterval
from community_os.domain.entities.coupon import normalize_code
from community_os.domain.ports.repositories import CouponRepository, PaymentTierRepository


@dataclass(frozen=True)
class CalculateCheckoutQuery(Query[CheckoutCalculationDto]):
    tier_id: str
    interval: str
    community_id: str
    coupon_code: Optional[str] = None


class CalculateCheckoutHandler(QueryHandler[CheckoutCalculationDto]):
    def __init__(
        self,
        payment_tier_repository: PaymentTierRepository,
        coupon_repository: CouponRepository,
    ):
        self._payment_tier_repository = payment_tier_repository
        self._coupon_repository = coupon_repository

    @translate_errors(CheckoutError)
    async def execute(self, query: CalculateCheckoutQuery) -> CheckoutCalculationDto:
        if not query.tier_id or not query.community_id:
            raise CheckoutError(CheckoutErrorCode.INVALID_INPUT, "Tier ID and community ID are required")
        try:
            interval = BillingInterval(query.interval)
        except ValueError:
            raise CheckoutError(CheckoutErrorCode.INVALID_INPUT, "Interval must be MONTHLY or ANNUAL")

        tier = await self._payment_tier_repository.find_by_id(query.tier_id)
        if tier is None or tier.is_archived or tier.community_id != query.community_id:
            raise CheckoutError(CheckoutErrorCode.TIER_NOT_FOUND)
        if not tier.is_active:
            raise CheckoutError(CheckoutErrorCode.TIER_NOT_ACTIVE)

        subtotal = tier.price_for(interval.value)
        discount = 0
        coupon_code = None
        if query.coupon_code and query.coupon_code.strip():
            coupon = await self._coupon_repository.find_by_code(
                query.community_id, normalize_code(query.coupon_code)
            )
            if coupon is None:
                raise CheckoutError(CheckoutErrorCode.COUPON_NOT_FOUND)
            if not coupon.is_available():
                raise CheckoutError(
                    CheckoutErrorCode.COUPON_INVALID, "Coupon is inactive, expired or used up"
                )
            discount = coupon.discount_for(subtotal)
            coupon_code = coupon.code

        return CheckoutCalculationDto(
            subtotal=subtotal,
            discount=discount,
            total=max(0, subtotal - discount),
            coupon_applied=coupon_code is not None,
            coupon_code=coupon_code,
            trial_days=Config.CHECKOUT_TRIAL_DAYS,
            interval=interval.value,
            tier_name=tier.name,
        )
