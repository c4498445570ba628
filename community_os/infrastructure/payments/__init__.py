"""
Payment gateways.

- StripeGateway: Stripe REST API over httpx (STRIPE_SECRET_KEY set)
- OfflinePaymentGateway: mints local ids so billing flows work without Stripe
"""

from community_os.infrastructure.payments.offline_gateway import OfflinePaymentGateway
from community_os.infrastructure.payments.signature import verify_stripe_signature
from community_os.infrastructure.payments.stripe_gateway import StripeGateway

__all__ = ["OfflinePaymentGateway", "StripeGateway", "verify_stripe_signature"]
