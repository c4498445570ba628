"""Form bodies sent to the Stripe API, captured with an httpx mock transport."""

from datetime import datetime, timezone
from urllib.parse import parse_qsl

import httpx
import pytest

from community_os.domain.ports.services import PaymentGatewayError
from community_os.infrastructure.payments.stripe_gateway import StripeGateway


def make_gateway(requests, status_code=200, body=None):
    def respond(request: httpx.Request) -> httpx.Response:
        requests.append((request.url.path, dict(parse_qsl(request.content.decode()))))
        return httpx.Response(status_code, json=body if body is not None else {"id": "coupon_1"})

    client = httpx.AsyncClient(
        base_url="https://stripe.test/v1", transport=httpx.MockTransport(respond)
    )
    return StripeGateway(client, webhook_secret="whsec_unit", webhook_tolerance=300, currency="usd")


@pytest.mark.asyncio
async def test_coupon_limits_are_mirrored():
    requests = []
    gateway = make_gateway(requests)
    expires_at = datetime(2099, 1, 1, tzinfo=timezone.utc)

    coupon_id = await gateway.create_coupon(
        "LAUNCH25", "PERCENTAGE", 25, expires_at=expires_at, max_uses=3
    )

    assert coupon_id == "coupon_1"
    path, form = requests[0]
    assert path == "/v1/coupons"
    assert form["percent_off"] == "25"
    assert form["redeem_by"] == str(int(expires_at.timestamp()))
    assert form["max_redemptions"] == "3"


@pytest.mark.asyncio
async def test_unlimited_fixed_coupon():
    requests = []
    gateway = make_gateway(requests)

    await gateway.create_coupon("GIFT", "FIXED_AMOUNT", 500)

    _, form = requests[0]
    assert form["amount_off"] == "500"
    assert form["currency"] == "usd"
    assert "redeem_by" not in form
    assert "max_redemptions" not in form


@pytest.mark.asyncio
async def test_error_response_raises_gateway_error():
    gateway = make_gateway([], status_code=400, body={"error": {"message": "No such coupon"}})

    with pytest.raises(PaymentGatewayError, match="No such coupon"):
        await gateway.create_coupon("GIFT", "FIXED_AMOUNT", 500)
