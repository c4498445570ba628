"""Identity provider integration (user lifecycle webhooks)."""

from community_os.infrastructure.identity.svix_verifier import (
    SvixWebhookVerifier,
    compute_svix_signature,
)

__all__ = ["SvixWebhookVerifier", "compute_svix_signature"]
