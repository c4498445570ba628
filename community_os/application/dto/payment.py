"""Billing DTOs. Amounts are integer cents, timestamps ISO-8601 strings."""

from typing import Optional

from community_os.application.dto.base import CamelModel


class PaymentTierDto(CamelModel):
    id: str
    community_id: str
    name: str
    description: str
    price_monthly: int
    price_annual: int
    features: list[str]
    is_active: bool
    is_free: bool
    stripe_product_id: Optional[str] = None
    stripe_price_monthly_id: Optional[str] = None
    stripe_price_annual_id: Optional[str] = None
    created_at: str
    updated_at: str


class CouponDto(CamelModel):
    id: str
    community_id: str
    code: str
    discount_type: str
    discount_value: int
    expires_at: Optional[str] = None
    max_uses: Optional[int] = None
    used_count: int
    is_active: bool
    is_available: bool
    stripe_coupon_id: Optional[str] = None
    created_at: str
    updated_at: str


class CheckoutCalculationDto(CamelModel):
    subtotal: int
    discount: int
    total: int
    coupon_applied: bool
    coupon_code: Optional[str] = None
    trial_days: int
    interval: str
    tier_name: str


class SubscriptionDto(CamelModel):
    id: str
    user_id: str
    community_id: str
    payment_tier_id: str
    payment_tier_name: str
    status: str
    interval: str
    current_period_start: str
    current_period_end: str
    cancel_at_period_end: bool
    trial_ends_at: Optional[str] = None
    stripe_subscription_id: Optional[str] = None
    stripe_customer_id: Optional[str] = None
    is_active: bool
    created_at: str
    updated_at: str


class CheckoutSessionDto(CamelModel):
    checkout_url: str
    session_id: str


class AccessCheckDto(CamelModel):
    has_access: bool
    reason: Optional[str] = None
    required_tier: Optional[str] = None


class WebhookReceiptDto(CamelModel):
    received: bool
    event_type: str
