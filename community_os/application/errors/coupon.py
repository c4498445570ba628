from enum import Enum

from community_os.application.common.errors import ApplicationError


class CouponErrorCode(str, Enum):
    INVALID_INPUT = "INVALID_INPUT"
    INVALID_CODE = "INVALID_CODE"
    INVALID_DISCOUNT = "INVALID_DISCOUNT"
    COUPON_NOT_FOUND = "COUPON_NOT_FOUND"
    COUPON_INACTIVE = "COUPON_INACTIVE"
    COUPON_EXPIRED = "COUPON_EXPIRED"
    MAX_USES_REACHED = "MAX_USES_REACHED"
    UNAUTHORIZED = "UNAUTHORIZED"
    STRIPE_ERROR = "STRIPE_ERROR"
    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"


class CouponError(ApplicationError):
    feature = "coupons"
    codes = CouponErrorCode
    field_codes = {
        "code": CouponErrorCode.INVALID_CODE,
        "discount": CouponErrorCode.INVALID_DISCOUNT,
        "unavailable": CouponErrorCode.COUPON_INACTIVE,
        "inactive": CouponErrorCode.COUPON_INACTIVE,
    }
