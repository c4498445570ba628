"""
Subscription Repository Port - Interface for subscription persistence.
"""

from abc import ABC, abstractmethod
from typing import Optional
from community_os.domain.entities.subscription import Subscription


class SubscriptionRepository(ABC):
    @abstractmethod
    async def create(self, subscription: Subscription) -> Subscription: ...

    @abstractmethod
    async def find_by_id(self, subscription_id: str) -> Optional[Subscription]: ...

    @abstractmethod
    async def find_by_user_and_community(
        self, user_id: str, community_id: str
    ) -> Optional[Subscription]:
        """Most recent subscription of a user in a community, cancelled ones included."""
        ...

    @abstractmethod
    async def find_by_stripe_subscription_id(
        self, stripe_subscription_id: str
    ) -> Optional[Subscription]: ...

    @abstractmethod
    async def update(self, subscription: Subscription) -> Subscription: ...
