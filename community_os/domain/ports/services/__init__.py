from community_os.domain.ports.services.payment_gateway import (
    CheckoutSession,
    CheckoutSessionRequest,
    InvalidWebhookSignature,
    PaymentGateway,
    PaymentGatewayError,
    WebhookEvent,
)
from community_os.domain.ports.services.certificate_renderer import (
    CertificateRenderer,
    CertificateRenderingError,
)
from community_os.domain.ports.services.email_sender import EmailSender
from community_os.domain.ports.services.identity_webhook import IdentityWebhookVerifier

__all__ = [
    "CheckoutSession",
    "CheckoutSessionRequest",
    "InvalidWebhookSignature",
    "PaymentGateway",
    "PaymentGatewayError",
    "WebhookEvent",
    "CertificateRenderer",
    "CertificateRenderingError",
    "EmailSender",
    "IdentityWebhookVerifier",
]
