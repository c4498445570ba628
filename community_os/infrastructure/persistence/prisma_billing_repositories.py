"""
Prisma repositories for payment tiers, coupons and subscriptions.

Prices and discount amounts are integer cents. Stripe identifiers are
stored alongside the rows that mirror them.
"""

from typing import Any, Dict, Optional

from prisma import Prisma
from prisma.models import Coupon as PrismaCoupon
from prisma.models import PaymentTier as PrismaPaymentTier
from prisma.models import Subscription as PrismaSubscription

from community_os.domain.entities import (
    BillingInterval,
    Coupon,
    DiscountType,
    PaymentTier,
    Subscription,
    SubscriptionStatus,
)
from community_os.domain.ports.repositories import (
    CouponRepository,
    PaymentTierRepository,
    SubscriptionRepository,
)
from community_os.infrastructure.persistence.prisma_support import archived_now


class PrismaPaymentTierRepository(PaymentTierRepository):
    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        self._prisma = prisma

    def _to_entity(self, record: PrismaPaymentTier) -> PaymentTier:
        return PaymentTier(
            id=record.id,
            community_id=record.community_id,
            name=record.name,
            description=record.description,
            price_monthly=record.price_monthly,
            price_annual=record.price_annual,
            created_at=record.created_at,
            updated_at=record.updated_at,
            features=list(record.features or []),
            is_active=record.is_active,
            stripe_product_id=record.stripe_product_id,
            stripe_price_monthly_id=record.stripe_price_monthly_id,
            stripe_price_annual_id=record.stripe_price_annual_id,
            deleted_at=record.deleted_at,
        )

    def _to_data(self, tier: PaymentTier) -> Dict[str, Any]:
        return {
            "community_id": tier.community_id,
            "name": tier.name,
            "description": tier.description,
            "price_monthly": tier.price_monthly,
            "price_annual": tier.price_annual,
            "features": list(tier.features),
            "is_active": tier.is_active,
            "stripe_product_id": tier.stripe_product_id,
            "stripe_price_monthly_id": tier.stripe_price_monthly_id,
            "stripe_price_annual_id": tier.stripe_price_annual_id,
            "created_at": tier.created_at,
            "updated_at": tier.updated_at,
            "deleted_at": tier.deleted_at,
        }

    async def create(self, tier: PaymentTier) -> PaymentTier:
        record = await self._prisma.paymenttier.create(data={"id": tier.id, **self._to_data(tier)})
        return self._to_entity(record)

    async def find_by_id(self, tier_id: str) -> Optional[PaymentTier]:
        record = await self._prisma.paymenttier.find_unique(where={"id": tier_id})
        return self._to_entity(record) if record else None

    async def find_by_community_id(self, community_id: str) -> list[PaymentTier]:
        records = await self._prisma.paymenttier.find_many(
            where={"community_id": community_id, "deleted_at": None},
            order=[{"price_monthly": "asc"}, {"created_at": "asc"}],
        )
        return [self._to_entity(r) for r in records]

    async def count_by_community_id(self, community_id: str) -> int:
        return await self._prisma.paymenttier.count(
            where={"community_id": community_id, "deleted_at": None}
        )

    async def find_free_tier(self, community_id: str) -> Optional[PaymentTier]:
        record = await self._prisma.paymenttier.find_first(
            where={
                "community_id": community_id,
                "deleted_at": None,
                "price_monthly": 0,
                "price_annual": 0,
            }
        )
        return self._to_entity(record) if record else None

    async def update(self, tier: PaymentTier) -> PaymentTier:
        record = await self._prisma.paymenttier.update(
            where={"id": tier.id},
            data=self._to_data(tier),
        )
        return self._to_entity(record) if record else tier

    async def delete(self, tier_id: str) -> None:
        await self._prisma.paymenttier.update_many(
            where={"id": tier_id, "deleted_at": None},
            data=archived_now(),
        )


class PrismaCouponRepository(CouponRepository):
    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        self._prisma = prisma

    def _to_entity(self, record: PrismaCoupon) -> Coupon:
        return Coupon(
            id=record.id,
            community_id=record.community_id,
            code=record.code,
            discount_type=DiscountType(record.discount_type),
            discount_value=record.discount_value,
            created_at=record.created_at,
            updated_at=record.updated_at,
            expires_at=record.expires_at,
            max_uses=record.max_uses,
            used_count=record.used_count,
            is_active=record.is_active,
            stripe_coupon_id=record.stripe_coupon_id,
            deleted_at=record.deleted_at,
        )

    def _to_data(self, coupon: Coupon) -> Dict[str, Any]:
        return {
            "community_id": coupon.community_id,
            "code": coupon.code,
            "discount_type": coupon.discount_type.value,
            "discount_value": coupon.discount_value,
            "expires_at": coupon.expires_at,
            "max_uses": coupon.max_uses,
            "used_count": coupon.used_count,
            "is_active": coupon.is_active,
            "stripe_coupon_id": coupon.stripe_coupon_id,
            "created_at": coupon.created_at,
            "updated_at": coupon.updated_at,
            "deleted_at": coupon.deleted_at,
        }

    async def create(self, coupon: Coupon) -> Coupon:
        record = await self._prisma.coupon.create(data={"id": coupon.id, **self._to_data(coupon)})
        return self._to_entity(record)

    async def find_by_id(self, coupon_id: str) -> Optional[Coupon]:
        record = await self._prisma.coupon.find_unique(where={"id": coupon_id})
        return self._to_entity(record) if record else None

    async def find_by_code(self, community_id: str, code: str) -> Optional[Coupon]:
        record = await self._prisma.coupon.find_first(
            where={"community_id": community_id, "code": code, "deleted_at": None}
        )
        return self._to_entity(record) if record else None

    async def find_by_community_id(self, community_id: str) -> list[Coupon]:
        records = await self._prisma.coupon.find_many(
            where={"community_id": community_id, "deleted_at": None},
            order={"created_at": "desc"},
        )
        return [self._to_entity(r) for r in records]

    async def update(self, coupon: Coupon) -> Coupon:
        record = await self._prisma.coupon.update(
            where={"id": coupon.id},
            data=self._to_data(coupon),
        )
        return self._to_entity(record) if record else coupon


class PrismaSubscriptionRepository(SubscriptionRepository):
    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        self._prisma = prisma

    def _to_entity(self, record: PrismaSubscription) -> Subscription:
        return Subscription(
            id=record.id,
            user_id=record.user_id,
            community_id=record.community_id,
            payment_tier_id=record.payment_tier_id,
            status=SubscriptionStatus(record.status),
            interval=BillingInterval(record.interval),
            current_period_start=record.current_period_start,
            current_period_end=record.current_period_end,
            created_at=record.created_at,
            updated_at=record.updated_at,
            stripe_subscription_id=record.stripe_subscription_id,
            stripe_customer_id=record.stripe_customer_id,
            cancel_at_period_end=record.cancel_at_period_end,
            trial_ends_at=record.trial_ends_at,
            deleted_at=record.deleted_at,
        )

    def _to_data(self, subscription: Subscription) -> Dict[str, Any]:
        return {
            "user_id": subscription.user_id,
            "community_id": subscription.community_id,
            "payment_tier_id": subscription.payment_tier_id,
            "status": subscription.status.value,
            "interval": subscription.interval.value,
            "current_period_start": subscription.current_period_start,
            "current_period_end": subscription.current_period_end,
            "stripe_subscription_id": subscription.stripe_subscription_id,
            "stripe_customer_id": subscription.stripe_customer_id,
            "cancel_at_period_end": subscription.cancel_at_period_end,
            "trial_ends_at": subscription.trial_ends_at,
            "created_at": subscription.created_at,
            "updated_at": subscription.updated_at,
            "deleted_at": subscription.deleted_at,
        }

    async def create(self, subscription: Subscription) -> Subscription:
        record = await self._prisma.subscription.create(
            data={"id": subscription.id, **self._to_data(subscription)}
        )
        return self._to_entity(record)

    async def find_by_id(self, subscription_id: str) -> Optional[Subscription]:
        record = await self._prisma.subscription.find_unique(where={"id": subscription_id})
        return self._to_entity(record) if record else None

    async def find_by_user_and_community(
        self, user_id: str, community_id: str
    ) -> Optional[Subscription]:
        record = await self._prisma.subscription.find_first(
            where={"user_id": user_id, "community_id": community_id},
            order={"created_at": "desc"},
        )
        return self._to_entity(record) if record else None

    async def find_by_stripe_subscription_id(
        self, stripe_subscription_id: str
    ) -> Optional[Subscription]:
        record = await self._prisma.subscription.find_unique(
            where={"stripe_subscription_id": stripe_subscription_id}
        )
        return self._to_entity(record) if record else None

    async def update(self, subscription: Subscription) -> Subscription:
        record = await self._prisma.subscription.update(
            where={"id": subscription.id},
            data=self._to_data(subscription),
        )
        return self._to_entity(record) if record else subscription
