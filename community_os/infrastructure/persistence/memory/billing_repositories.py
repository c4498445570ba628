"""Memory repositories for payment tiers, coupons and subscriptions."""

from typing import Optional

from community_os.domain.entities import Coupon, PaymentTier, Subscription
from community_os.domain.ports.repositories import (
    CouponRepository,
    PaymentTierRepository,
    SubscriptionRepository,
)
from community_os.infrastructure.persistence.memory.store import (
    InMemoryStore,
    MemoryTable,
    live,
    soft_delete,
)


class MemoryPaymentTierRepository(PaymentTierRepository):
    def __init__(self, store: InMemoryStore):
        self._table: MemoryTable[PaymentTier] = MemoryTable(store.payment_tiers)

    async def create(self, tier: PaymentTier) -> PaymentTier:
        return self._table.insert(tier)

    async def find_by_id(self, tier_id: str) -> Optional[PaymentTier]:
        return self._table.get(tier_id)

    async def find_by_community_id(self, community_id: str) -> list[PaymentTier]:
        tiers = self._table.where(lambda t: t.community_id == community_id and live(t))
        return sorted(tiers, key=lambda t: (t.price_monthly, t.created_at))

    async def count_by_community_id(self, community_id: str) -> int:
        return self._table.count(lambda t: t.community_id == community_id and live(t))

    async def find_free_tier(self, community_id: str) -> Optional[PaymentTier]:
        return self._table.first(
            lambda t: t.community_id == community_id and live(t) and t.is_free
        )

    async def update(self, tier: PaymentTier) -> PaymentTier:
        return self._table.replace(tier)

    async def delete(self, tier_id: str) -> None:
        soft_delete(self._table, tier_id)


class MemoryCouponRepository(CouponRepository):
    def __init__(self, store: InMemoryStore):
        self._table: MemoryTable[Coupon] = MemoryTable(store.coupons)

    async def create(self, coupon: Coupon) -> Coupon:
        return self._table.insert(coupon)

    async def find_by_id(self, coupon_id: str) -> Optional[Coupon]:
        return self._table.get(coupon_id)

    async def find_by_code(self, community_id: str, code: str) -> Optional[Coupon]:
        return self._table.first(
            lambda c: c.community_id == community_id and c.code == code and live(c)
        )

    async def find_by_community_id(self, community_id: str) -> list[Coupon]:
        coupons = self._table.where(lambda c: c.community_id == community_id and live(c))
        return sorted(coupons, key=lambda c: c.created_at, reverse=True)

    async def update(self, coupon: Coupon) -> Coupon:
        return self._table.replace(coupon)


class MemorySubscriptionRepository(SubscriptionRepository):
    def __init__(self, store: InMemoryStore):
        self._table: MemoryTable[Subscription] = MemoryTable(store.subscriptions)

    async def create(self, subscription: Subscription) -> Subscription:
        return self._table.insert(subscription)

    async def find_by_id(self, subscription_id: str) -> Optional[Subscription]:
        return self._table.get(subscription_id)

    async def find_by_user_and_community(
        self, user_id: str, community_id: str
    ) -> Optional[Subscription]:
        matches = self._table.where(
            lambda s: s.user_id == user_id and s.community_id == community_id
        )
        return max(matches, key=lambda s: s.created_at) if matches else None

    async def find_by_stripe_subscription_id(
        self, stripe_subscription_id: str
    ) -> Optional[Subscription]:
        return self._table.first(lambda s: s.stripe_subscription_id == stripe_subscription_id)

    async def update(self, subscription: Subscription) -> Subscription:
        return self._table.replace(subscription)
