import logging
from dataclasses import dataclass

from community_os.application.common.errors import translate_errors
from community_os.application.common.interfaces import Command, CommandHandler
from community_os.application.dto import SubscriptionDto
from community_os.application.errors import SubscriptionError, SubscriptionErrorCode
from community_os.application.mappers import to_subscription_dto
from community_os.domain.ports.repositories import PaymentTierRepository, SubscriptionRepository
from community_os.domain.ports.services import PaymentGateway, PaymentGatewayError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CancelSubscriptionCommand(Command[SubscriptionDto]):
    subscription_id: str
    user_id: str


class CancelSubscriptionHandler(CommandHandler[SubscriptionDto]):
    """Cancels at the end of the paid period; access continues until then."""

    def __init__(
        self,
        subscription_repository: SubscriptionRepository,
        payment_tier_repository: PaymentTierRepository,
        payment_gateway: PaymentGateway,
    ):
        self._subscription_repository = subscription_repository
        self._payment_tier_repository = payment_tier_repository
        self._payment_gateway = payment_gateway

    @translate_errors(SubscriptionError)
    async def execute(self, command: CancelSubscriptionCommand) -> SubscriptionDto:
        if not command.subscription_id or not command.user_id:
            raise SubscriptionError(
                SubscriptionErrorCode.INVALID_INPUT, "Subscription ID and user ID are required"
            )

        subscription = await self._subscription_repository.find_by_id(command.subscription_id)
        if subscription is None:
            raise SubscriptionError(SubscriptionErrorCode.SUBSCRIPTION_NOT_FOUND)
        if subscription.user_id != command.user_id:
            raise SubscriptionError(
                SubscriptionErrorCode.UNAUTHORIZED, "You can only cancel your own subscription"
            )

        subscription.cancel()
        if subscription.stripe_subscription_id:
            try:
                await self._payment_gateway.cancel_at_period_end(
                    subscription.stripe_subscription_id
                )
            except PaymentGatewayError as exc:
                logger.error(f"[PAYMENTS] Gateway cancel failed for {subscription.id}: {exc}")
                raise SubscriptionError(SubscriptionErrorCode.STRIPE_ERROR, str(exc)) from exc

        updated = await self._subscription_repository.update(subscription)
        tier = await self._payment_tier_repository.find_by_id(updated.payment_tier_id)
        return to_subscription_dto(updated, tier.name if tier else "Unknown")
