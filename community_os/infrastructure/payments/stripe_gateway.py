"""
Stripe Gateway - PaymentGateway over the Stripe REST API.

Stripe takes form-encoded bodies with bracketed keys for nested objects
(metadata[user_id]=..., recurring[interval]=month). Amounts are cents.
"""

import logging
from datetime import datetime
from typing import Any, Dict, Optional

import httpx

from community_os.config.settings import Config
from community_os.domain.ports.services import (
    CheckoutSession,
    CheckoutSessionRequest,
    PaymentGateway,
    PaymentGatewayError,
    WebhookEvent,
)
from community_os.infrastructure.payments.signature import verify_stripe_signature

logger = logging.getLogger(__name__)

_STRIPE_INTERVALS = {"MONTHLY": "month", "ANNUAL": "year"}


class StripeGateway(PaymentGateway):
    def __init__(
        self,
        client: httpx.AsyncClient,
        webhook_secret: str = Config.STRIPE_WEBHOOK_SECRET,
        webhook_tolerance: int = Config.STRIPE_WEBHOOK_TOLERANCE,
        currency: str = Config.CURRENCY,
    ):
        self._client = client
        self._webhook_secret = webhook_secret
        self._webhook_tolerance = webhook_tolerance
        self._currency = currency

    @staticmethod
    def create_client(
        secret_key: str = Config.STRIPE_SECRET_KEY,
        api_base: str = Config.STRIPE_API_BASE,
        timeout: float = Config.STRIPE_TIMEOUT,
    ) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=api_base,
            auth=(secret_key, ""),
            timeout=timeout,
        )

    async def _post(self, path: str, data: Dict[str, Any]) -> Dict[str, Any]:
        form = {k: v for k, v in data.items() if v is not None}
        try:
            response = await self._client.post(path, data=form)
        except httpx.HTTPError as e:
            logger.error(f"[STRIPE] {path} request failed: {e}")
            raise PaymentGatewayError(f"Stripe request failed: {e}") from e

        if response.status_code >= 400:
            error_detail = response.text
            try:
                error_detail = response.json().get("error", {}).get("message", error_detail)
            except (ValueError, AttributeError):
                pass
            logger.error(f"[STRIPE] {path} returned {response.status_code}: {error_detail}")
            raise PaymentGatewayError(f"Stripe error ({response.status_code}): {error_detail}")

        try:
            return response.json()
        except ValueError as e:
            raise PaymentGatewayError("Stripe returned a non-JSON response") from e

    @staticmethod
    def _require(body: Dict[str, Any], key: str) -> str:
        value = body.get(key)
        if not value:
            raise PaymentGatewayError(f"Stripe response missing '{key}'")
        return str(value)

    async def create_product(self, name: str, description: str) -> str:
        body = await self._post(
            "/products",
            {"name": name, "description": description or None},
        )
        return self._require(body, "id")

    async def create_price(self, product_id: str, amount: int, interval: str) -> str:
        stripe_interval = _STRIPE_INTERVALS.get(interval)
        if stripe_interval is None:
            raise PaymentGatewayError(f"Unsupported billing interval: {interval}")
        body = await self._post(
            "/prices",
            {
                "product": product_id,
                "unit_amount": amount,
                "currency": self._currency,
                "recurring[interval]": stripe_interval,
            },
        )
        return self._require(body, "id")

    async def create_coupon(
        self,
        code: str,
        discount_type: str,
        discount_value: int,
        expires_at: Optional[datetime] = None,
        max_uses: Optional[int] = None,
    ) -> str:
        data: Dict[str, Any] = {
            "name": code,
            "duration": "once",
            "redeem_by": int(expires_at.timestamp()) if expires_at else None,
            "max_redemptions": max_uses,
        }
        if discount_type == "PERCENTAGE":
            data["percent_off"] = discount_value
        else:
            data["amount_off"] = discount_value
            data["currency"] = self._currency
        body = await self._post("/coupons", data)
        return self._require(body, "id")

    async def create_checkout_session(
        self, request: CheckoutSessionRequest
    ) -> CheckoutSession:
        metadata: Dict[str, Optional[str]] = {
            "user_id": request.user_id,
            "community_id": request.community_id,
            "tier_id": request.tier_id,
            "interval": request.interval,
            "coupon_id": request.coupon_id,
        }
        data: Dict[str, Any] = {
            "mode": "subscription",
            "line_items[0][price]": request.price_id,
            "line_items[0][quantity]": 1,
            "success_url": request.success_url,
            "cancel_url": request.cancel_url,
            "customer_email": request.customer_email,
        }
        if request.trial_days > 0:
            data["subscription_data[trial_period_days]"] = request.trial_days
        for key, value in metadata.items():
            data[f"metadata[{key}]"] = value
            data[f"subscription_data[metadata][{key}]"] = value
        if request.stripe_coupon_id:
            data["discounts[0][coupon]"] = request.stripe_coupon_id

        body = await self._post("/checkout/sessions", data)
        return CheckoutSession(
            session_id=self._require(body, "id"),
            url=self._require(body, "url"),
        )

    def construct_webhook_event(self, payload: bytes, signature: str) -> WebhookEvent:
        return verify_stripe_signature(
            payload, signature, self._webhook_secret, self._webhook_tolerance
        )

    async def cancel_at_period_end(self, subscription_id: str) -> None:
        await self._post(
            f"/subscriptions/{subscription_id}",
            {"cancel_at_period_end": "true"},
        )
