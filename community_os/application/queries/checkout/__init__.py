"""Checkout queries."""

from .calculate_checkout import CalculateCheckoutQuery, CalculateCheckoutHandler

__all__ = ["CalculateCheckoutQuery", "CalculateCheckoutHandler"]
