"""Coupon commands."""

from .create_coupon import CreateCouponCommand, CreateCouponHandler

__all__ = ["CreateCouponCommand", "CreateCouponHandler"]
