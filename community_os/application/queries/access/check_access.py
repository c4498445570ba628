"""
Check Access Query - can a user open a tier-gated course or post?

    no required tier / free tier          -> allowed
    no subscription in the community      -> "No active subscription"
    subscription not ACTIVE or TRIALING   -> "Subscription expired or cancelled"
    subscription on a different tier      -> "Insufficient subscription tier"
"""

from dataclasses import dataclass
from typing import Optional

from community_os.application.common.errors import translate_errors
from community_os.application.common.interfaces import Query, QueryHandler
from community_os.application.dto import AccessCheckDto
from community_os.application.errors import AccessError, AccessErrorCode
from community_os.domain.ports.repositories import (
    CourseRepository,
    PaymentTierRepository,
    PostRepository,
    SubscriptionRepository,
)

RESOURCE_TYPES = ("course", "post")

NO_SUBSCRIPTION = "No active subscription"
SUBSCRIPTION_INACTIVE = "Subscription expired or cancelled"
INSUFFICIENT_TIER = "Insufficient subscription tier"


@dataclass(frozen=True)
class CheckAccessQuery(Query[AccessCheckDto]):
    user_id: str
    resource_type: str
    resource_id: str


class CheckAccessHandler(QueryHandler[AccessCheckDto]):
    def __init__(
        self,
        course_repository: CourseRepository,
        post_repository: PostRepository,
        payment_tier_repository: PaymentTierRepository,
        subscription_repository: SubscriptionRepository,
    ):
        self._course_repository = course_repository
        self._post_repository = post_repository
        self._payment_tier_repository = payment_tier_repository
        self._subscription_repository = subscription_repository

    @translate_errors(AccessError)
    async def execute(self, query: CheckAccessQuery) -> AccessCheckDto:
        if not query.user_id or not query.resource_id:
            raise AccessError(AccessErrorCode.INVALID_INPUT, "User ID and resource ID are required")
        if query.resource_type not in RESOURCE_TYPES:
            raise AccessError(AccessErrorCode.INVALID_INPUT, "Resource type must be course or post")

        community_id, tier_id = await self._resolve(query.resource_type, query.resource_id)
        if not tier_id:
            return AccessCheckDto(has_access=True)

        tier = await self._payment_tier_repository.find_by_id(tier_id)
        if tier is None or tier.is_free:
            return AccessCheckDto(has_access=True)

        subscription = await self._subscription_repository.find_by_user_and_community(
            query.user_id, community_id
        )
        if subscription is None:
            return AccessCheckDto(has_access=False, reason=NO_SUBSCRIPTION, required_tier=tier.name)
        if not subscription.is_active:
            return AccessCheckDto(
                has_access=False, reason=SUBSCRIPTION_INACTIVE, required_tier=tier.name
            )
        if subscription.payment_tier_id != tier.id:
            return AccessCheckDto(has_access=False, reason=INSUFFICIENT_TIER, required_tier=tier.name)
        return AccessCheckDto(has_access=True)

    async def _resolve(self, resource_type: str, resource_id: str) -> tuple[str, Optional[str]]:
        if resource_type == "course":
            resource = await self._course_repository.find_by_id(resource_id)
        else:
            resource = await self._post_repository.find_by_id(resource_id)
        if resource is None or resource.is_archived:
            raise AccessError(AccessErrorCode.RESOURCE_NOT_FOUND, f"{resource_type.capitalize()} not found")
        return resource.community_id, resource.payment_tier_id
