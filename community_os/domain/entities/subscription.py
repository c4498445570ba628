"""
Subscription Entity - A user's paid membership of a community tier.

Status transitions are driven by the payment provider's webhook events;
cancel() only schedules cancellation at the end of the current period.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Optional
from uuid import uuid4

from community_os.domain.exceptions import DomainValidationError


class SubscriptionStatus(str, Enum):
    ACTIVE = "ACTIVE"
    TRIALING = "TRIALING"
    CANCELLED = "CANCELLED"
    PAST_DUE = "PAST_DUE"


class BillingInterval(str, Enum):
    MONTHLY = "MONTHLY"
    ANNUAL = "ANNUAL"

    def period(self) -> timedelta:
        return timedelta(days=365) if self is BillingInterval.ANNUAL else timedelta(days=30)


@dataclass
class Subscription:
    id: str
    user_id: str
    community_id: str
    payment_tier_id: str
    status: SubscriptionStatus
    interval: BillingInterval
    current_period_start: datetime
    current_period_end: datetime
    created_at: datetime
    updated_at: datetime
    stripe_subscription_id: Optional[str] = None
    stripe_customer_id: Optional[str] = None
    cancel_at_period_end: bool = False
    trial_ends_at: Optional[datetime] = None
    deleted_at: Optional[datetime] = None

    def __post_init__(self):
        self.status = SubscriptionStatus(self.status)
        self.interval = BillingInterval(self.interval)
        self._validate_period(self.current_period_start, self.current_period_end)

    @classmethod
    def start_trial(
        cls,
        user_id: str,
        community_id: str,
        payment_tier_id: str,
        interval: BillingInterval,
        trial_days: int,
        stripe_subscription_id: Optional[str] = None,
        stripe_customer_id: Optional[str] = None,
    ) -> "Subscription":
        now = datetime.now(timezone.utc)
        trial_end = now + timedelta(days=trial_days)
        return cls(
            id=str(uuid4()),
            user_id=user_id,
            community_id=community_id,
            payment_tier_id=payment_tier_id,
            status=SubscriptionStatus.TRIALING,
            interval=interval,
            current_period_start=now,
            current_period_end=trial_end if trial_days > 0 else now + interval.period(),
            created_at=now,
            updated_at=now,
            stripe_subscription_id=stripe_subscription_id,
            stripe_customer_id=stripe_customer_id,
            trial_ends_at=trial_end if trial_days > 0 else None,
        )

    @property
    def is_archived(self) -> bool:
        return self.deleted_at is not None

    @property
    def is_active(self) -> bool:
        """Whether the subscription currently grants access."""
        return self.status in (SubscriptionStatus.ACTIVE, SubscriptionStatus.TRIALING)

    def update_stripe_ids(self, subscription_id: str, customer_id: Optional[str]) -> None:
        self.stripe_subscription_id = subscription_id
        self.stripe_customer_id = customer_id
        self.updated_at = datetime.now(timezone.utc)

    def update_status(self, status: SubscriptionStatus) -> None:
        self._ensure_not_archived()
        self.status = status
        self.updated_at = datetime.now(timezone.utc)

    def activate(self) -> None:
        self._ensure_not_archived()
        if self.status == SubscriptionStatus.ACTIVE:
            raise DomainValidationError("Subscription is already active", field="active")
        self.status = SubscriptionStatus.ACTIVE
        self.updated_at = datetime.now(timezone.utc)

    def cancel(self) -> None:
        self._ensure_not_archived()
        if self.status == SubscriptionStatus.CANCELLED or self.cancel_at_period_end:
            raise DomainValidationError("Subscription is already cancelled", field="cancelled")
        self.cancel_at_period_end = True
        self.updated_at = datetime.now(timezone.utc)

    def schedule_cancellation(self, cancel_at_period_end: bool) -> None:
        self.cancel_at_period_end = cancel_at_period_end
        self.updated_at = datetime.now(timezone.utc)

    def cancel_immediately(self) -> None:
        if self.status == SubscriptionStatus.CANCELLED:
            raise DomainValidationError("Subscription is already cancelled", field="cancelled")
        now = datetime.now(timezone.utc)
        self.status = SubscriptionStatus.CANCELLED
        self.cancel_at_period_end = False
        self.deleted_at = now
        self.updated_at = now

    def mark_past_due(self) -> None:
        self._ensure_not_archived()
        if self.status == SubscriptionStatus.CANCELLED:
            raise DomainValidationError(
                "Cannot mark cancelled subscription as past due", field="cancelled"
            )
        self.status = SubscriptionStatus.PAST_DUE
        self.updated_at = datetime.now(timezone.utc)

    def renew_period(self, new_period_end: datetime) -> None:
        self._ensure_not_archived()
        if self.status == SubscriptionStatus.CANCELLED:
            raise DomainValidationError("Cannot renew cancelled subscription", field="cancelled")
        new_start = self.current_period_end
        self._validate_period(new_start, new_period_end)
        self.current_period_start = new_start
        self.current_period_end = new_period_end
        self.cancel_at_period_end = False
        if self.status == SubscriptionStatus.TRIALING:
            self.status = SubscriptionStatus.ACTIVE
            self.trial_ends_at = None
        self.updated_at = datetime.now(timezone.utc)

    def _ensure_not_archived(self) -> None:
        if self.is_archived:
            raise DomainValidationError("Cannot modify archived subscription", field="archived")

    @staticmethod
    def _validate_period(start: datetime, end: datetime) -> None:
        if end <= start:
            raise DomainValidationError("Period end must be after period start", field="period")
