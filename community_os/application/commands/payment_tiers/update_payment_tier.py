"""
Update Payment Tier Command.

Gateway prices are immutable, so a changed amount on a mirrored tier gets a
fresh price id; existing subscriptions keep the old one.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from community_os.application.common.errors import translate_errors
from community_os.application.common.interfaces import Command, CommandHandler
from community_os.application.dto import PaymentTierDto
from community_os.application.errors import PaymentTierError, PaymentTierErrorCode
from community_os.application.mappers import to_payment_tier_dto
from community_os.domain.entities import BillingInterval
from community_os.domain.ports.repositories import PaymentTierRepository
from community_os.domain.ports.services import PaymentGateway, PaymentGatewayError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UpdatePaymentTierCommand(Command[PaymentTierDto]):
    tier_id: str
    name: Optional[str] = None
    description: Optional[str] = None
    price_monthly: Optional[int] = None
    price_annual: Optional[int] = None
    features: Optional[list[str]] = None


class UpdatePaymentTierHandler(CommandHandler[PaymentTierDto]):
    def __init__(
        self,
        payment_tier_repository: PaymentTierRepository,
        payment_gateway: PaymentGateway,
    ):
        self._payment_tier_repository = payment_tier_repository
        self._payment_gateway = payment_gateway

    @translate_errors(PaymentTierError)
    async def execute(self, command: UpdatePaymentTierCommand) -> PaymentTierDto:
        if not command.tier_id or not command.tier_id.strip():
            raise PaymentTierError(PaymentTierErrorCode.INVALID_INPUT, "Tier ID is required")

        tier = await self._payment_tier_repository.find_by_id(command.tier_id)
        if tier is None or tier.is_archived:
            raise PaymentTierError(PaymentTierErrorCode.TIER_NOT_FOUND)

        was_free = tier.is_free
        old_monthly, old_annual = tier.price_monthly, tier.price_annual
        tier.update(
            name=command.name,
            description=command.description,
            price_monthly=command.price_monthly,
            price_annual=command.price_annual,
            features=command.features,
        )
        if was_free != tier.is_free:
            raise PaymentTierError(
                PaymentTierErrorCode.INVALID_PRICE, "A tier cannot switch between free and paid"
            )

        if tier.stripe_product_id and (
            tier.price_monthly != old_monthly or tier.price_annual != old_annual
        ):
            await self._reprice(tier, old_monthly, old_annual)

        updated = await self._payment_tier_repository.update(tier)
        return to_payment_tier_dto(updated)

    async def _reprice(self, tier, old_monthly: int, old_annual: int) -> None:
        monthly_id = tier.stripe_price_monthly_id
        annual_id = tier.stripe_price_annual_id
        try:
            if tier.price_monthly != old_monthly:
                monthly_id = (
                    await self._payment_gateway.create_price(
                        tier.stripe_product_id, tier.price_monthly, BillingInterval.MONTHLY.value
                    )
                    if tier.price_monthly > 0
                    else None
                )
            if tier.price_annual != old_annual:
                annual_id = (
                    await self._payment_gateway.create_price(
                        tier.stripe_product_id, tier.price_annual, BillingInterval.ANNUAL.value
                    )
                    if tier.price_annual > 0
                    else None
                )
        except PaymentGatewayError as exc:
            logger.error(f"[PAYMENTS] Gateway rejected new prices for tier {tier.id}: {exc}")
            raise PaymentTierError(PaymentTierErrorCode.STRIPE_ERROR, str(exc)) from exc
        tier.attach_stripe_ids(tier.stripe_product_id, monthly_id, annual_id)
