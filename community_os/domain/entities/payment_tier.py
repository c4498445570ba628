"""
PaymentTier Entity - A community's membership plan, priced in cents.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional
from uuid import uuid4

from community_os.domain.exceptions import DomainValidationError


@dataclass
class PaymentTier:
    id: str
    community_id: str
    name: str
    description: str
    price_monthly: int
    price_annual: int
    created_at: datetime
    updated_at: datetime
    features: list[str] = field(default_factory=list)
    is_active: bool = True
    stripe_product_id: Optional[str] = None
    stripe_price_monthly_id: Optional[str] = None
    stripe_price_annual_id: Optional[str] = None
    deleted_at: Optional[datetime] = None

    def __post_init__(self):
        self._validate_name(self.name)
        self._validate_description(self.description)
        self._validate_price(self.price_monthly, "Monthly")
        self._validate_price(self.price_annual, "Annual")
        self.features = self._validate_features(self.features)

    @classmethod
    def create(
        cls,
        community_id: str,
        name: str,
        description: str,
        price_monthly: int,
        price_annual: int,
        features: Optional[list[str]] = None,
    ) -> "PaymentTier":
        now = datetime.now(timezone.utc)
        return cls(
            id=str(uuid4()),
            community_id=community_id,
            name=name,
            description=description,
            price_monthly=price_monthly,
            price_annual=price_annual,
            created_at=now,
            updated_at=now,
            features=list(features or []),
        )

    @property
    def is_free(self) -> bool:
        return self.price_monthly == 0 and self.price_annual == 0

    @property
    def is_archived(self) -> bool:
        return self.deleted_at is not None

    def price_for(self, interval: str) -> int:
        return self.price_annual if interval == "ANNUAL" else self.price_monthly

    def stripe_price_for(self, interval: str) -> Optional[str]:
        return self.stripe_price_annual_id if interval == "ANNUAL" else self.stripe_price_monthly_id

    def attach_stripe_ids(
        self, product_id: str, monthly_price_id: Optional[str], annual_price_id: Optional[str]
    ) -> None:
        self.stripe_product_id = product_id
        self.stripe_price_monthly_id = monthly_price_id
        self.stripe_price_annual_id = annual_price_id
        self.updated_at = datetime.now(timezone.utc)

    def update(
        self,
        name: Optional[str] = None,
        description: Optional[str] = None,
        price_monthly: Optional[int] = None,
        price_annual: Optional[int] = None,
        features: Optional[list[str]] = None,
    ) -> None:
        self._ensure_not_archived()
        if name is not None:
            self._validate_name(name)
            self.name = name
        if description is not None:
            self._validate_description(description)
            self.description = description
        if price_monthly is not None:
            self._validate_price(price_monthly, "Monthly")
            self.price_monthly = price_monthly
        if price_annual is not None:
            self._validate_price(price_annual, "Annual")
            self.price_annual = price_annual
        if features is not None:
            self.features = self._validate_features(features)
        self.updated_at = datetime.now(timezone.utc)

    def activate(self) -> None:
        self._ensure_not_archived()
        if self.is_active:
            raise DomainValidationError("Payment tier is already active", field="active")
        self.is_active = True
        self.updated_at = datetime.now(timezone.utc)

    def deactivate(self) -> None:
        self._ensure_not_archived()
        if not self.is_active:
            raise DomainValidationError("Payment tier is already inactive", field="inactive")
        self.is_active = False
        self.updated_at = datetime.now(timezone.utc)

    def _ensure_not_archived(self) -> None:
        if self.is_archived:
            raise DomainValidationError("Cannot modify archived payment tier", field="archived")

    @staticmethod
    def _validate_name(name: str) -> None:
        trimmed = (name or "").strip()
        if len(trimmed) < 3 or len(trimmed) > 50:
            raise DomainValidationError(
                "Payment tier name must be between 3 and 50 characters", field="name"
            )

    @staticmethod
    def _validate_description(description: str) -> None:
        trimmed = (description or "").strip()
        if len(trimmed) < 10 or len(trimmed) > 500:
            raise DomainValidationError(
                "Payment tier description must be between 10 and 500 characters",
                field="description",
            )

    @staticmethod
    def _validate_price(price: int, label: str) -> None:
        if isinstance(price, bool) or not isinstance(price, int):
            raise DomainValidationError(f"{label} price must be an integer (cents)", field="price")
        if price < 0:
            raise DomainValidationError(f"{label} price cannot be negative", field="price")

    @staticmethod
    def _validate_features(features: list[str]) -> list[str]:
        cleaned = []
        for feature in features:
            if not isinstance(feature, str) or not feature.strip():
                raise DomainValidationError(
                    "Each feature must be a non-empty string", field="features"
                )
            cleaned.append(feature.strip())
        return cleaned
