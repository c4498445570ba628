from community_os.application.dto import CouponDto, PaymentTierDto, SubscriptionDto
from community_os.application.mappers.common import to_iso
from community_os.domain.entities import Coupon, PaymentTier, Subscription


def to_payment_tier_dto(tier: PaymentTier) -> PaymentTierDto:
    return PaymentTierDto(
        id=tier.id,
        community_id=tier.community_id,
        name=tier.name,
        description=tier.description,
        price_monthly=tier.price_monthly,
        price_annual=tier.price_annual,
        features=list(tier.features),
        is_active=tier.is_active,
        is_free=tier.is_free,
        stripe_product_id=tier.stripe_product_id,
        stripe_price_monthly_id=tier.stripe_price_monthly_id,
        stripe_price_annual_id=tier.stripe_price_annual_id,
        created_at=to_iso(tier.created_at),
        updated_at=to_iso(tier.updated_at),
    )


def to_coupon_dto(coupon: Coupon) -> CouponDto:
    return CouponDto(
        id=coupon.id,
        community_id=coupon.community_id,
        code=coupon.code,
        discount_type=coupon.discount_type.value,
        discount_value=coupon.discount_value,
        expires_at=to_iso(coupon.expires_at),
        max_uses=coupon.max_uses,
        used_count=coupon.used_count,
        is_active=coupon.is_active,
        is_available=coupon.is_available(),
        stripe_coupon_id=coupon.stripe_coupon_id,
        created_at=to_iso(coupon.created_at),
        updated_at=to_iso(coupon.updated_at),
    )


def to_subscription_dto(subscription: Subscription, tier_name: str) -> SubscriptionDto:
    return SubscriptionDto(
        id=subscription.id,
        user_id=subscription.user_id,
        community_id=subscription.community_id,
        payment_tier_id=subscription.payment_tier_id,
        payment_tier_name=tier_name,
        status=subscription.status.value,
        interval=subscription.interval.value,
        current_period_start=to_iso(subscription.current_period_start),
        current_period_end=to_iso(subscription.current_period_end),
        cancel_at_period_end=subscription.cancel_at_period_end,
        trial_ends_at=to_iso(subscription.trial_ends_at),
        stripe_subscription_id=subscription.stripe_subscription_id,
        stripe_customer_id=subscription.stripe_customer_id,
        is_active=subscription.is_active,
        created_at=to_iso(subscription.created_at),
        updated_at=to_iso(subscription.updated_at),
    )
