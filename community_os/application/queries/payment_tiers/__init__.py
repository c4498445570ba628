"""Payment tier queries."""

from .payment_tiers import (
    GetPaymentTierHandler,
    GetPaymentTierQuery,
    ListPaymentTiersHandler,
    ListPaymentTiersQuery,
)

__all__ = [
    "GetPaymentTierQuery",
    "GetPaymentTierHandler",
    "ListPaymentTiersQuery",
    "ListPaymentTiersHandler",
]
