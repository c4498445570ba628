from dataclasses import dataclass

from community_os.application.common.errors import translate_errors
from community_os.application.common.interfaces import Command, CommandHandler
from community_os.application.dto import PaymentTierDto
from community_os.application.errors import PaymentTierError, PaymentTierErrorCode
from community_os.application.mappers import to_payment_tier_dto
from community_os.domain.entities import PaymentTier
from community_os.domain.ports.repositories import PaymentTierRepository


@dataclass(frozen=True)
class ActivatePaymentTierCommand(Command[PaymentTierDto]):
    tier_id: str


@dataclass(frozen=True)
class DeactivatePaymentTierCommand(Command[PaymentTierDto]):
    tier_id: str


async def _load_tier(repository: PaymentTierRepository, tier_id: str) -> PaymentTier:
    if not tier_id or not tier_id.strip():
        raise PaymentTierError(PaymentTierErrorCode.INVALID_INPUT, "Tier ID is required")
    tier = await repository.find_by_id(tier_id)
    if tier is None or tier.is_archived:
        raise PaymentTierError(PaymentTierErrorCode.TIER_NOT_FOUND)
    return tier


class ActivatePaymentTierHandler(CommandHandler[PaymentTierDto]):
    def __init__(self, payment_tier_repository: PaymentTierRepository):
        self._payment_tier_repository = payment_tier_repository

    @translate_errors(PaymentTierError)
    async def execute(self, command: ActivatePaymentTierCommand) -> PaymentTierDto:
        tier = await _load_tier(self._payment_tier_repository, command.tier_id)
        tier.activate()
        return to_payment_tier_dto(await self._payment_tier_repository.update(tier))


class DeactivatePaymentTierHandler(CommandHandler[PaymentTierDto]):
    """Inactive tiers stay attached to existing subscriptions but cannot be bought."""

    def __init__(self, payment_tier_repository: PaymentTierRepository):
        self._payment_tier_repository = payment_tier_repository

    @translate_errors(PaymentTierError)
    async def execute(self, command: DeactivatePaymentTierCommand) -> PaymentTierDto:
        tier = await _load_tier(self._payment_tier_repository, command.tier_id)
        tier.deactivate()
        return to_payment_tier_dto(await self._payment_tier_repository.update(tier))
