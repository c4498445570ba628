"""
Identity Webhook Port - Authenticates user lifecycle events pushed by the identity provider.

Implementations:
- infrastructure/identity/svix_verifier.py  (svix-id / svix-timestamp / svix-signature headers)
"""

from abc import ABC, abstractmethod

from community_os.domain.ports.services.payment_gateway import WebhookEvent


class IdentityWebhookVerifier(ABC):
    @abstractmethod
    def verify(
        self, payload: bytes, message_id: str, timestamp: str, signature: str
    ) -> WebhookEvent:
        """Authenticate and parse a webhook body. Raises InvalidWebhookSignature."""
        ...
