from enum import Enum

from community_os.application.common.errors import ApplicationError


class SubscriptionErrorCode(str, Enum):
    INVALID_INPUT = "INVALID_INPUT"
    SUBSCRIPTION_NOT_FOUND = "SUBSCRIPTION_NOT_FOUND"
    TIER_NOT_FOUND = "TIER_NOT_FOUND"
    TIER_NOT_ACTIVE = "TIER_NOT_ACTIVE"
    USER_NOT_FOUND = "USER_NOT_FOUND"
    ALREADY_SUBSCRIBED = "ALREADY_SUBSCRIBED"
    ALREADY_CANCELLED = "ALREADY_CANCELLED"
    UNAUTHORIZED = "UNAUTHORIZED"
    STRIPE_ERROR = "STRIPE_ERROR"
    CHECKOUT_FAILED = "CHECKOUT_FAILED"
    INVALID_SIGNATURE = "INVALID_SIGNATURE"
    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"


class SubscriptionError(ApplicationError):
    feature = "subscriptions"
    codes = SubscriptionErrorCode
    field_codes = {
        "cancelled": SubscriptionErrorCode.ALREADY_CANCELLED,
    }
