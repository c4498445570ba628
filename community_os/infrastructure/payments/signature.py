"""Stripe webhook signature verification (Stripe-Signature: t=...,v1=...)."""

import hashlib
import hmac
import json
import time
from typing import Optional

from community_os.domain.ports.services import InvalidWebhookSignature, WebhookEvent


def compute_signature(payload: bytes, timestamp: int, secret: str) -> str:
    signed = f"{timestamp}.".encode() + payload
    return hmac.new(secret.encode(), signed, hashlib.sha256).hexdigest()


def _parse_header(header: str) -> tuple[Optional[int], list[str]]:
    timestamp = None
    signatures = []
    for item in header.split(","):
        key, _, value = item.strip().partition("=")
        if key == "t":
            try:
                timestamp = int(value)
            except ValueError:
                return None, []
        elif key == "v1":
            signatures.append(value)
    return timestamp, signatures


def verify_stripe_signature(
    payload: bytes,
    header: str,
    secret: str,
    tolerance: int,
    now: Optional[float] = None,
) -> WebhookEvent:
    """Authenticate a webhook body and parse it into a WebhookEvent."""
    if not secret:
        raise InvalidWebhookSignature("Webhook secret is not configured")
    if not header:
        raise InvalidWebhookSignature("Missing signature header")

    timestamp, signatures = _parse_header(header)
    if timestamp is None or not signatures:
        raise InvalidWebhookSignature("Malformed signature header")

    current = time.time() if now is None else now
    if tolerance and abs(current - timestamp) > tolerance:
        raise InvalidWebhookSignature("Timestamp outside the tolerance zone")

    expected = compute_signature(payload, timestamp, secret)
    if not any(hmac.compare_digest(expected, sig) for sig in signatures):
        raise InvalidWebhookSignature("No signatures found matching the expected signature")

    try:
        body = json.loads(payload)
    except (ValueError, UnicodeDecodeError) as e:
        raise InvalidWebhookSignature(f"Invalid payload: {e}") from e
    if not isinstance(body, dict):
        raise InvalidWebhookSignature("Invalid payload: expected an object")

    return WebhookEvent(
        id=str(body.get("id", "")),
        type=str(body.get("type", "")),
        data=body.get("data") or {},
    )
