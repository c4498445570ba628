"""
Coupon Repository Port - Codes are unique per community.
"""

from abc import ABC, abstractmethod
from typing import Optional
from community_os.domain.entities.coupon import Coupon


class CouponRepository(ABC):
    @abstractmethod
    async def create(self, coupon: Coupon) -> Coupon: ...

    @abstractmethod
    async def find_by_id(self, coupon_id: str) -> Optional[Coupon]: ...

    @abstractmethod
    async def find_by_code(self, community_id: str, code: str) -> Optional[Coupon]: ...

    @abstractmethod
    async def find_by_community_id(self, community_id: str) -> list[Coupon]: ...

    @abstractmethod
    async def update(self, coupon: Coupon) -> Coupon: ...
