import json

import pytest

from community_os.domain.ports.services import InvalidWebhookSignature
from community_os.infrastructure.payments.signature import compute_signature, verify_stripe_signature

SECRET = "whsec_unit"
NOW = 1_700_000_000
PAYLOAD = json.dumps({"id": "evt_1", "type": "invoice.payment_failed", "data": {"object": {}}}).encode()


def header_for(payload: bytes, timestamp: int = NOW, secret: str = SECRET) -> str:
    return f"t={timestamp},v1={compute_signature(payload, timestamp, secret)}"


def test_valid_signature_parses_event():
    event = verify_stripe_signature(PAYLOAD, header_for(PAYLOAD), SECRET, 300, now=NOW)
    assert event.id == "evt_1"
    assert event.type == "invoice.payment_failed"
    assert event.data == {"object": {}}


def test_any_matching_v1_is_accepted():
    header = f"t={NOW},v1=deadbeef,v1={compute_signature(PAYLOAD, NOW, SECRET)}"
    assert verify_stripe_signature(PAYLOAD, header, SECRET, 300, now=NOW).id == "evt_1"


def test_tampered_payload_is_rejected():
    tampered = PAYLOAD.replace(b"evt_1", b"evt_2")
    with pytest.raises(InvalidWebhookSignature):
        verify_stripe_signature(tampered, header_for(PAYLOAD), SECRET, 300, now=NOW)


def test_timestamp_outside_tolerance():
    with pytest.raises(InvalidWebhookSignature, match="tolerance"):
        verify_stripe_signature(PAYLOAD, header_for(PAYLOAD), SECRET, 300, now=NOW + 301)


@pytest.mark.parametrize("header", ["", "garbage", "t=abc,v1=00", f"t={NOW}"])
def test_malformed_headers(header):
    with pytest.raises(InvalidWebhookSignature):
        verify_stripe_signature(PAYLOAD, header, SECRET, 300, now=NOW)


def test_unconfigured_secret():
    with pytest.raises(InvalidWebhookSignature, match="not configured"):
        verify_stripe_signature(PAYLOAD, header_for(PAYLOAD), "", 300, now=NOW)


def test_non_object_payload():
    payload = b"[1, 2, 3]"
    with pytest.raises(InvalidWebhookSignature, match="expected an object"):
        verify_stripe_signature(payload, header_for(payload), SECRET, 300, now=NOW)
