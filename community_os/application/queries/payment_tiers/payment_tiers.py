from dataclasses import dataclass

from community_os.application.common.errors import translate_errors
from community_os.application.common.interfaces import Query, QueryHandler
from community_os.application.dto import PaymentTierDto
from community_os.application.errors import PaymentTierError, PaymentTierErrorCode
from community_os.application.mappers import to_payment_tier_dto
from community_os.domain.ports.repositories import PaymentTierRepository


@dataclass(frozen=True)
class GetPaymentTierQuery(Query[PaymentTierDto]):
    tier_id: str


@dataclass(frozen=True)
class ListPaymentTiersQuery(Query[list[PaymentTierDto]]):
    community_id: str


class GetPaymentTierHandler(QueryHandler[PaymentTierDto]):
    def __init__(self, payment_tier_repository: PaymentTierRepository):
        self._payment_tier_repository = payment_tier_repository

    @translate_errors(PaymentTierError)
    async def execute(self, query: GetPaymentTierQuery) -> PaymentTierDto:
        if not query.tier_id or not query.tier_id.strip():
            raise PaymentTierError(PaymentTierErrorCode.INVALID_INPUT, "Tier ID is required")
        tier = await self._payment_tier_repository.find_by_id(query.tier_id)
        if tier is None:
            raise PaymentTierError(PaymentTierErrorCode.TIER_NOT_FOUND)
        return to_payment_tier_dto(tier)


class ListPaymentTiersHandler(QueryHandler[list[PaymentTierDto]]):
    def __init__(self, payment_tier_repository: PaymentTierRepository):
        self._payment_tier_repository = payment_tier_repository

    @translate_errors(PaymentTierError)
    async def execute(self, query: ListPaymentTiersQuery) -> list[PaymentTierDto]:
        if not query.community_id or not query.community_id.strip():
            raise PaymentTierError(PaymentTierErrorCode.INVALID_INPUT, "Community ID is required")
        tiers = await self._payment_tier_repository.find_by_community_id(query.community_id)
        return [to_payment_tier_dto(tier) for tier in tiers]
