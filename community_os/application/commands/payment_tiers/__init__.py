"""Payment tier commands."""

from .create_payment_tier import CreatePaymentTierCommand, CreatePaymentTierHandler
from .update_payment_tier import UpdatePaymentTierCommand, UpdatePaymentTierHandler
from .toggle_payment_tier import (
    ActivatePaymentTierCommand,
    ActivatePaymentTierHandler,
    DeactivatePaymentTierCommand,
    DeactivatePaymentTierHandler,
)

__all__ = [
    "CreatePaymentTierCommand",
    "CreatePaymentTierHandler",
    "UpdatePaymentTierCommand",
    "UpdatePaymentTierHandler",
    "ActivatePaymentTierCommand",
    "ActivatePaymentTierHandler",
    "DeactivatePaymentTierCommand",
    "DeactivatePaymentTierHandler",
]
