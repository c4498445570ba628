"""
Coupon Entity - Community discount code applied at checkout.
"""

import math
import re
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Optional
from uuid import uuid4

from community_os.domain.exceptions import DomainValidationError

_CODE_PATTERN = re.compile(r"^[A-Z0-9]{4,20}$")


class DiscountType(str, Enum):
    PERCENTAGE = "PERCENTAGE"
    FIXED_AMOUNT = "FIXED_AMOUNT"


def normalize_code(code: str) -> str:
    return (code or "").strip().upper()


@dataclass
class Coupon:
    id: str
    community_id: str
    code: str
    discount_type: DiscountType
    discount_value: int
    created_at: datetime
    updated_at: datetime
    expires_at: Optional[datetime] = None
    max_uses: Optional[int] = None
    used_count: int = 0
    is_active: bool = True
    stripe_coupon_id: Optional[str] = None
    deleted_at: Optional[datetime] = None

    def __post_init__(self):
        if not _CODE_PATTERN.match(self.code or ""):
            raise DomainValidationError(
                "Coupon code must be 4-20 uppercase alphanumeric characters", field="code"
            )
        try:
            self.discount_type = DiscountType(self.discount_type)
        except ValueError:
            raise DomainValidationError("Invalid discount type", field="discount")
        value = self.discount_value
        if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            raise DomainValidationError(
                "Discount value must be a positive integer", field="discount"
            )
        if self.discount_type == DiscountType.PERCENTAGE and value > 100:
            raise DomainValidationError(
                "Percentage discount cannot exceed 100", field="discount"
            )
        if self.max_uses is not None and self.max_uses < 1:
            raise DomainValidationError("Max uses must be at least 1", field="max_uses")
        # Offset-less timestamps are UTC
        if self.expires_at is not None and self.expires_at.tzinfo is None:
            self.expires_at = self.expires_at.replace(tzinfo=timezone.utc)

    @classmethod
    def create(
        cls,
        community_id: str,
        code: str,
        discount_type: str,
        discount_value: int,
        expires_at: Optional[datetime] = None,
        max_uses: Optional[int] = None,
    ) -> "Coupon":
        now = datetime.now(timezone.utc)
        return cls(
            id=str(uuid4()),
            community_id=community_id,
            code=normalize_code(code),
            discount_type=discount_type,
            discount_value=discount_value,
            created_at=now,
            updated_at=now,
            expires_at=expires_at,
            max_uses=max_uses,
        )

    @property
    def is_archived(self) -> bool:
        return self.deleted_at is not None

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        if self.expires_at is None:
            return False
        return (now or datetime.now(timezone.utc)) > self.expires_at

    @property
    def uses_exhausted(self) -> bool:
        return self.max_uses is not None and self.used_count >= self.max_uses

    def is_available(self, now: Optional[datetime] = None) -> bool:
        return (
            self.is_active
            and not self.is_archived
            and not self.is_expired(now)
            and not self.uses_exhausted
        )

    def discount_for(self, subtotal: int) -> int:
        """Discount in cents for a subtotal in cents; never exceeds the subtotal."""
        if subtotal < 0:
            raise DomainValidationError("Price cannot be negative", field="price")
        if self.discount_type == DiscountType.PERCENTAGE:
            return min(subtotal, math.floor(subtotal * self.discount_value / 100 + 0.5))
        return min(self.discount_value, subtotal)

    def use(self) -> None:
        if not self.is_available():
            raise DomainValidationError("Coupon is not available", field="unavailable")
        self.used_count += 1
        self.updated_at = datetime.now(timezone.utc)

    def deactivate(self) -> None:
        if not self.is_active:
            raise DomainValidationError("Coupon is already inactive", field="inactive")
        self.is_active = False
        self.updated_at = datetime.now(timezone.utc)
