from enum import Enum

from community_os.application.common.errors import ApplicationError


class CheckoutErrorCode(str, Enum):
    INVALID_INPUT = "INVALID_INPUT"
    TIER_NOT_FOUND = "TIER_NOT_FOUND"
    TIER_NOT_ACTIVE = "TIER_NOT_ACTIVE"
    COUPON_NOT_FOUND = "COUPON_NOT_FOUND"
    COUPON_INVALID = "COUPON_INVALID"
    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"


class CheckoutError(ApplicationError):
    feature = "checkout"
    codes = CheckoutErrorCode
