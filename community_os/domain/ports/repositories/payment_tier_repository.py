"""
Payment Tier Repository Port - Interface for tier persistence.
"""

from abc import ABC, abstractmethod
from typing import Optional
from community_os.domain.entities.payment_tier import PaymentTier


class PaymentTierRepository(ABC):
    @abstractmethod
    async def create(self, tier: PaymentTier) -> PaymentTier: ...

    @abstractmethod
    async def find_by_id(self, tier_id: str) -> Optional[PaymentTier]: ...

    @abstractmethod
    async def find_by_community_id(self, community_id: str) -> list[PaymentTier]: ...

    @abstractmethod
    async def count_by_community_id(self, community_id: str) -> int: ...

    @abstractmethod
    async def find_free_tier(self, community_id: str) -> Optional[PaymentTier]: ...

    @abstractmethod
    async def update(self, tier: PaymentTier) -> PaymentTier: ...

    @abstractmethod
    async def delete(self, tier_id: str) -> None: ...
