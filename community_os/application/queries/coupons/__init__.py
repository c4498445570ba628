"""Coupon queries."""

from .list_coupons import ListCouponsQuery, ListCouponsHandler
from .apply_coupon import ApplyCouponQuery, ApplyCouponHandler, ensure_usable

__all__ = [
    "ListCouponsQuery",
    "ListCouponsHandler",
    "ApplyCouponQuery",
    "ApplyCouponHandler",
    "ensure_usable",
]
