"""
Create Payment Tier Command.

A community offers at most MAX_TIERS_PER_COMMUNITY tiers and at most one of
them is free. Paid tiers are mirrored to the payment gateway as a product
with one recurring price per billing interval.
"""

import logging
from dataclasses import dataclass, field

from community_os.application.common.errors import translate_errors
from community_os.application.common.interfaces import Command, CommandHandler
from community_os.application.dto import PaymentTierDto
from community_os.application.errors import PaymentTierError, PaymentTierErrorCode
from community_os.application.mappers import to_payment_tier_dto
from community_os.config.settings import Config
from community_os.domain.entities import BillingInterval, PaymentTier
from community_os.domain.ports.repositories import CommunityRepository, PaymentTierRepository
from community_os.domain.ports.services import PaymentGateway, PaymentGatewayError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CreatePaymentTierCommand(Command[PaymentTierDto]):
    community_id: str
    name: str
    description: str
    price_monthly: int
    price_annual: int
    features: list[str] = field(default_factory=list)


class CreatePaymentTierHandler(CommandHandler[PaymentTierDto]):
    def __init__(
        self,
        payment_tier_repository: PaymentTierRepository,
        community_repository: CommunityRepository,
        payment_gateway: PaymentGateway,
    ):
        self._payment_tier_repository = payment_tier_repository
        self._community_repository = community_repository
        self._payment_gateway = payment_gateway

    @translate_errors(PaymentTierError)
    async def execute(self, command: CreatePaymentTierCommand) -> PaymentTierDto:
        if not command.community_id or not command.community_id.strip():
            raise PaymentTierError(PaymentTierErrorCode.INVALID_INPUT, "Community ID is required")

        community = await self._community_repository.find_by_id(command.community_id)
        if community is None or community.is_archived:
            raise PaymentTierError(PaymentTierErrorCode.COMMUNITY_NOT_FOUND)

        count = await self._payment_tier_repository.count_by_community_id(command.community_id)
        if count >= Config.MAX_TIERS_PER_COMMUNITY:
            raise PaymentTierError(
                PaymentTierErrorCode.MAX_TIERS_REACHED,
                f"A community can have at most {Config.MAX_TIERS_PER_COMMUNITY} payment tiers",
            )

        tier = PaymentTier.create(
            community_id=command.community_id,
            name=command.name,
            description=command.description,
            price_monthly=command.price_monthly,
            price_annual=command.price_annual,
            features=command.features,
        )
        if tier.is_free and await self._payment_tier_repository.find_free_tier(
            command.community_id
        ):
            raise PaymentTierError(PaymentTierErrorCode.FREE_TIER_EXISTS)

        if not tier.is_free:
            await self._mirror_to_gateway(tier)

        created = await self._payment_tier_repository.create(tier)
        logger.info(f"[PAYMENTS] Tier {created.id} created for community {created.community_id}")
        return to_payment_tier_dto(created)

    async def _mirror_to_gateway(self, tier: PaymentTier) -> None:
        try:
            product_id = await self._payment_gateway.create_product(tier.name, tier.description)
            monthly_id = None
            annual_id = None
            if tier.price_monthly > 0:
                monthly_id = await self._payment_gateway.create_price(
                    product_id, tier.price_monthly, BillingInterval.MONTHLY.value
                )
            if tier.price_annual > 0:
                annual_id = await self._payment_gateway.create_price(
                    product_id, tier.price_annual, BillingInterval.ANNUAL.value
                )
        except PaymentGatewayError as exc:
            logger.error(f"[PAYMENTS] Gateway rejected tier '{tier.name}': {exc}")
            raise PaymentTierError(PaymentTierErrorCode.STRIPE_ERROR, str(exc)) from exc
        tier.attach_stripe_ids(product_id, monthly_id, annual_id)
