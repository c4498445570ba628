"""
Payments API Router.

Payment tiers, coupons, checkout, subscriptions and access checks.
Checkout endpoints are rate limited per client address.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Request, status
from dishka.integrations.fastapi import FromDishka, inject

from community_os.application.commands.coupons import CreateCouponCommand, CreateCouponHandler
from community_os.application.commands.payment_tiers import (
    ActivatePaymentTierCommand,
    ActivatePaymentTierHandler,
    CreatePaymentTierCommand,
    CreatePaymentTierHandler,
    DeactivatePaymentTierCommand,
    DeactivatePaymentTierHandler,
    UpdatePaymentTierCommand,
    UpdatePaymentTierHandler,
)
from community_os.application.commands.subscriptions import (
    CancelSubscriptionCommand,
    CancelSubscriptionHandler,
    CreateSubscriptionCommand,
    CreateSubscriptionHandler,
)
from community_os.application.dto.payment import (
    AccessCheckDto,
    CheckoutCalculationDto,
    CheckoutSessionDto,
    CouponDto,
    PaymentTierDto,
    SubscriptionDto,
)
from community_os.application.errors import UserError, UserErrorCode
from community_os.application.queries.access import CheckAccessHandler, CheckAccessQuery
from community_os.application.queries.checkout import (
    CalculateCheckoutHandler,
    CalculateCheckoutQuery,
)
from community_os.application.queries.coupons import (
    ApplyCouponHandler,
    ApplyCouponQuery,
    ListCouponsHandler,
    ListCouponsQuery,
)
from community_os.application.queries.payment_tiers import (
    GetPaymentTierHandler,
    GetPaymentTierQuery,
    ListPaymentTiersHandler,
    ListPaymentTiersQuery,
)
from community_os.application.queries.subscriptions import (
    GetSubscriptionHandler,
    GetSubscriptionQuery,
)
from community_os.application.queries.users import GetUserHandler, GetUserQuery
from community_os.config.settings import Config
from community_os.presentation.dependencies.auth import AuthUser, get_current_user
from community_os.presentation.rate_limit import limiter
from community_os.presentation.schemas.payments import (
    ApplyCouponSchema,
    CalculateCheckoutSchema,
    CreateCheckoutSessionSchema,
    CreateCouponSchema,
    CreatePaymentTierSchema,
    UpdatePaymentTierSchema,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["payments"])


# ==================== PAYMENT TIERS ====================


@router.post(
    "/payment-tiers",
    response_model=PaymentTierDto,
    status_code=status.HTTP_201_CREATED,
)
@inject
async def create_payment_tier(
    body: CreatePaymentTierSchema,
    handler: FromDishka[CreatePaymentTierHandler],
):
    """Create a tier. Communities hold at most two tiers and one free tier."""
    command = CreatePaymentTierCommand(
        community_id=body.community_id,
        name=body.name,
        description=body.description,
        price_monthly=body.price_monthly,
        price_annual=body.price_annual,
        features=body.features,
    )
    return await handler.execute(command)


@router.get("/communities/{community_id}/payment-tiers", response_model=list[PaymentTierDto])
@inject
async def list_payment_tiers(community_id: str, handler: FromDishka[ListPaymentTiersHandler]):
    return await handler.execute(ListPaymentTiersQuery(community_id=community_id))


@router.get("/payment-tiers/{tier_id}", response_model=PaymentTierDto)
@inject
async def get_payment_tier(tier_id: str, handler: FromDishka[GetPaymentTierHandler]):
    return await handler.execute(GetPaymentTierQuery(tier_id=tier_id))


@router.patch("/payment-tiers/{tier_id}", response_model=PaymentTierDto)
@inject
async def update_payment_tier(
    tier_id: str,
    body: UpdatePaymentTierSchema,
    handler: FromDishka[UpdatePaymentTierHandler],
):
    command = UpdatePaymentTierCommand(
        tier_id=tier_id,
        name=body.name,
        description=body.description,
        price_monthly=body.price_monthly,
        price_annual=body.price_annual,
        features=body.features,
    )
    return await handler.execute(command)


@router.post("/payment-tiers/{tier_id}/activate", response_model=PaymentTierDto)
@inject
async def activate_payment_tier(tier_id: str, handler: FromDishka[ActivatePaymentTierHandler]):
    return await handler.execute(ActivatePaymentTierCommand(tier_id=tier_id))


@router.post("/payment-tiers/{tier_id}/deactivate", response_model=PaymentTierDto)
@inject
async def deactivate_payment_tier(
    tier_id: str, handler: FromDishka[DeactivatePaymentTierHandler]
):
    return await handler.execute(DeactivatePaymentTierCommand(tier_id=tier_id))


# ==================== COUPONS ====================


@router.post("/coupons", response_model=CouponDto, status_code=status.HTTP_201_CREATED)
@inject
async def create_coupon(
    body: CreateCouponSchema,
    handler: FromDishka[CreateCouponHandler],
    user_handler: FromDishka[GetUserHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    """Only members of the target community may create its coupons."""
    try:
        requester = await user_handler.execute(GetUserQuery(user_id=current_user.user_id))
        requester_community_id = requester.community_id
    except UserError as e:
        if e.code != UserErrorCode.USER_NOT_FOUND:
            raise
        logger.warning(f"[PAYMENTS] Coupon requested by unknown user {current_user.user_id}")
        requester_community_id = None

    command = CreateCouponCommand(
        community_id=body.community_id,
        requester_community_id=requester_community_id,
        code=body.code,
        discount_type=body.discount_type,
        discount_value=body.discount_value,
        expires_at=body.expires_at,
        max_uses=body.max_uses,
    )
    return await handler.execute(command)


@router.get("/communities/{community_id}/coupons", response_model=list[CouponDto])
@inject
async def list_coupons(community_id: str, handler: FromDishka[ListCouponsHandler]):
    return await handler.execute(ListCouponsQuery(community_id=community_id))


@router.post("/coupons/apply", response_model=CouponDto)
@inject
async def apply_coupon(body: ApplyCouponSchema, handler: FromDishka[ApplyCouponHandler]):
    """Check that a coupon code is currently usable."""
    return await handler.execute(ApplyCouponQuery(code=body.code, community_id=body.community_id))


# ==================== CHECKOUT ====================


@router.post("/checkout/calculate", response_model=CheckoutCalculationDto)
@limiter.limit(Config.CHECKOUT_RATE_LIMIT)
@inject
async def calculate_checkout(
    request: Request,
    body: CalculateCheckoutSchema,
    handler: FromDishka[CalculateCheckoutHandler],
):
    query = CalculateCheckoutQuery(
        tier_id=body.tier_id,
        interval=body.interval,
        community_id=body.community_id,
        coupon_code=body.coupon_code,
    )
    return await handler.execute(query)


@router.post("/checkout/session", response_model=CheckoutSessionDto)
@limiter.limit(Config.CHECKOUT_RATE_LIMIT)
@inject
async def create_checkout_session(
    request: Request,
    body: CreateCheckoutSessionSchema,
    handler: FromDishka[CreateSubscriptionHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    """Open a hosted checkout session; the subscription itself arrives by webhook."""
    command = CreateSubscriptionCommand(
        user_id=current_user.user_id,
        community_id=body.community_id,
        tier_id=body.tier_id,
        interval=body.interval,
        success_url=body.success_url,
        cancel_url=body.cancel_url,
        coupon_code=body.coupon_code,
    )
    return await handler.execute(command)


# ==================== SUBSCRIPTIONS ====================


@router.get(
    "/communities/{community_id}/subscription",
    response_model=Optional[SubscriptionDto],
)
@inject
async def get_subscription(
    community_id: str,
    handler: FromDishka[GetSubscriptionHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    query = GetSubscriptionQuery(user_id=current_user.user_id, community_id=community_id)
    return await handler.execute(query)


@router.post("/subscriptions/{subscription_id}/cancel", response_model=SubscriptionDto)
@inject
async def cancel_subscription(
    subscription_id: str,
    handler: FromDishka[CancelSubscriptionHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    """Cancel at the end of the current billing period."""
    command = CancelSubscriptionCommand(
        subscription_id=subscription_id, user_id=current_user.user_id
    )
    return await handler.execute(command)


# ==================== ACCESS ====================


@router.get("/access/{resource_type}/{resource_id}", response_model=AccessCheckDto)
@inject
async def check_access(
    resource_type: str,
    resource_id: str,
    handler: FromDishka[CheckAccessHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    query = CheckAccessQuery(
        user_id=current_user.user_id,
        resource_type=resource_type,
        resource_id=resource_id,
    )
    return await handler.execute(query)
