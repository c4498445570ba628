from enum import Enum

from community_os.application.common.errors import ApplicationError


class PaymentTierErrorCode(str, Enum):
    INVALID_INPUT = "INVALID_INPUT"
    INVALID_NAME = "INVALID_NAME"
    INVALID_DESCRIPTION = "INVALID_DESCRIPTION"
    INVALID_PRICE = "INVALID_PRICE"
    COMMUNITY_NOT_FOUND = "COMMUNITY_NOT_FOUND"
    TIER_NOT_FOUND = "TIER_NOT_FOUND"
    MAX_TIERS_REACHED = "MAX_TIERS_REACHED"
    FREE_TIER_EXISTS = "FREE_TIER_EXISTS"
    TIER_ALREADY_ACTIVE = "TIER_ALREADY_ACTIVE"
    TIER_ALREADY_INACTIVE = "TIER_ALREADY_INACTIVE"
    STRIPE_ERROR = "STRIPE_ERROR"
    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"


class PaymentTierError(ApplicationError):
    feature = "payment_tiers"
    codes = PaymentTierErrorCode
    field_codes = {
        "name": PaymentTierErrorCode.INVALID_NAME,
        "description": PaymentTierErrorCode.INVALID_DESCRIPTION,
        "price": PaymentTierErrorCode.INVALID_PRICE,
        "active": PaymentTierErrorCode.TIER_ALREADY_ACTIVE,
        "inactive": PaymentTierErrorCode.TIER_ALREADY_INACTIVE,
    }
