from dataclasses import dataclass
from typing import Optional

from community_os.application.common.errors import translate_errors
from community_os.application.common.interfaces import Query, QueryHandler
from community_os.application.dto import SubscriptionDto
from community_os.application.errors import SubscriptionError, SubscriptionErrorCode
from community_os.application.mappers import to_subscription_dto
from community_os.domain.ports.repositories import PaymentTierRepository, SubscriptionRepository


@dataclass(frozen=True)
class GetSubscriptionQuery(Query[Optional[SubscriptionDto]]):
    user_id: str
    community_id: str


class GetSubscriptionHandler(QueryHandler[Optional[SubscriptionDto]]):
    """None when the user never subscribed to the community."""

    def __init__(
        self,
        subscription_repository: SubscriptionRepository,
        payment_tier_repository: PaymentTierRepository,
    ):
        self._subscription_repository = subscription_repository
        self._payment_tier_repository = payment_tier_repository

    @translate_errors(SubscriptionError)
    async def execute(self, query: GetSubscriptionQuery) -> Optional[SubscriptionDto]:
        if not query.user_id or not query.community_id:
            raise SubscriptionError(
                SubscriptionErrorCode.INVALID_INPUT, "User ID and community ID are required"
            )
        subscription = await self._subscription_repository.find_by_user_and_community(
            query.user_id, query.community_id
        )
        if subscription is None:
            return None
        tier = await self._payment_tier_repository.find_by_id(subscription.payment_tier_id)
        return to_subscription_dto(subscription, tier.name if tier else "Unknown")
