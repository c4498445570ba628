"""
Svix-style webhook verification, as used by the identity provider.

    signed content   "{svix-id}.{svix-timestamp}.{body}"
    key              base64-decoded secret after the "whsec_" prefix
    svix-signature   space-separated "v1,<base64 HMAC-SHA256>" entries
"""

import base64
import binascii
import hashlib
import hmac
import json
import time
from typing import Optional

from community_os.domain.ports.services import (
    IdentityWebhookVerifier,
    InvalidWebhookSignature,
    WebhookEvent,
)

SECRET_PREFIX = "whsec_"


def _secret_key(secret: str) -> bytes:
    encoded = secret[len(SECRET_PREFIX):] if secret.startswith(SECRET_PREFIX) else secret
    try:
        return base64.b64decode(encoded, validate=True)
    except (binascii.Error, ValueError) as e:
        raise InvalidWebhookSignature("Webhook secret is not valid base64") from e


def compute_svix_signature(message_id: str, timestamp: str, payload: bytes, secret: str) -> str:
    signed = f"{message_id}.{timestamp}.".encode() + payload
    digest = hmac.new(_secret_key(secret), signed, hashlib.sha256).digest()
    return base64.b64encode(digest).decode()


class SvixWebhookVerifier(IdentityWebhookVerifier):
    def __init__(self, secret: str, tolerance: int = 300):
        self._secret = secret
        self._tolerance = tolerance

    def verify(
        self,
        payload: bytes,
        message_id: str,
        timestamp: str,
        signature: str,
        now: Optional[float] = None,
    ) -> WebhookEvent:
        if not self._secret:
            raise InvalidWebhookSignature("Webhook secret is not configured")
        if not (message_id and timestamp and signature):
            raise InvalidWebhookSignature("Missing required headers")

        try:
            sent_at = int(timestamp)
        except ValueError:
            raise InvalidWebhookSignature("Malformed timestamp header")
        current = time.time() if now is None else now
        if self._tolerance and abs(current - sent_at) > self._tolerance:
            raise InvalidWebhookSignature("Timestamp outside the tolerance zone")

        expected = compute_svix_signature(message_id, timestamp, payload, self._secret)
        candidates = [
            value
            for version, _, value in (entry.partition(",") for entry in signature.split())
            if version == "v1"
        ]
        if not any(hmac.compare_digest(expected, candidate) for candidate in candidates):
            raise InvalidWebhookSignature("No signatures found matching the expected signature")

        try:
            body = json.loads(payload)
        except (ValueError, UnicodeDecodeError) as e:
            raise InvalidWebhookSignature(f"Invalid payload: {e}") from e
        if not isinstance(body, dict):
            raise InvalidWebhookSignature("Invalid payload: expected an object")

        return WebhookEvent(
            id=message_id,
            type=str(body.get("type", "")),
            data=body.get("data") or {},
        )
