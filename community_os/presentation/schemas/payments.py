from datetime import datetime
from typing import Annotated, Literal, Optional

from pydantic import Field, StrictInt

from community_os.presentation.schemas.base import (
    BoundedText,
    RequestSchema,
    RequiredId,
    WebUrl,
)

Interval = Literal["MONTHLY", "ANNUAL"]


class CreatePaymentTierSchema(RequestSchema):
    community_id: RequiredId("Community ID")
    name: BoundedText("Name", 1, 100)
    description: BoundedText("Description", 0, 500) = ""
    price_monthly: StrictInt = Field(ge=0)
    price_annual: StrictInt = Field(ge=0)
    features: list[str] = Field(default_factory=list)


class UpdatePaymentTierSchema(RequestSchema):
    name: Optional[BoundedText("Name", 1, 100)] = None
    description: Optional[BoundedText("Description", 0, 500)] = None
    price_monthly: Optional[Annotated[StrictInt, Field(ge=0)]] = None
    price_annual: Optional[Annotated[StrictInt, Field(ge=0)]] = None
    features: Optional[list[str]] = None


CouponCode = BoundedText(
    "Code",
    4,
    20,
    pattern=r"^[A-Za-z0-9_-]+$",
    pattern_message="Code can only contain letters, numbers, hyphens, and underscores",
)


class CreateCouponSchema(RequestSchema):
    community_id: RequiredId("Community ID")
    code: CouponCode
    discount_type: Literal["PERCENTAGE", "FIXED_AMOUNT"]
    discount_value: StrictInt = Field(gt=0)
    expires_at: Optional[datetime] = None
    max_uses: Optional[Annotated[StrictInt, Field(ge=1)]] = None


class ApplyCouponSchema(RequestSchema):
    code: BoundedText("Code", 1, 20)
    community_id: RequiredId("Community ID")


class CalculateCheckoutSchema(RequestSchema):
    tier_id: RequiredId("Tier ID")
    community_id: RequiredId("Community ID")
    interval: Interval
    coupon_code: Optional[BoundedText("Coupon code", 1, 20)] = None


class CreateCheckoutSessionSchema(RequestSchema):
    tier_id: RequiredId("Tier ID")
    community_id: RequiredId("Community ID")
    interval: Interval
    coupon_code: Optional[BoundedText("Coupon code", 1, 20)] = None
    success_url: WebUrl("Success URL")
    cancel_url: WebUrl("Cancel URL")
