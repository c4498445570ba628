"""
Get Community Stats Query - Live counters for the community sidebar widget.
"""

from dataclasses import dataclass
from datetime import datetime, timezone

from community_os.application.common.errors import translate_errors
from community_os.application.common.interfaces import Query, QueryHandler
from community_os.application.dto import CommunityStatsDto
from community_os.application.errors import CommunityError, CommunityErrorCode
from community_os.domain.entities.user import ONLINE_WINDOW
from community_os.domain.ports.repositories import ActivityRepository, CommunityRepository
from community_os.domain.value_objects import Role


@dataclass(frozen=True)
class GetCommunityStatsQuery(Query[CommunityStatsDto]):
    community_id: str


class GetCommunityStatsHandler(QueryHandler[CommunityStatsDto]):
    def __init__(
        self,
        community_repository: CommunityRepository,
        activity_repository: ActivityRepository,
    ):
        self._community_repository = community_repository
        self._activity_repository = activity_repository

    @translate_errors(CommunityError)
    async def execute(self, query: GetCommunityStatsQuery) -> CommunityStatsDto:
        if not query.community_id or not query.community_id.strip():
            raise CommunityError(CommunityErrorCode.INVALID_INPUT, "Community ID is required")
        community = await self._community_repository.find_by_id(query.community_id)
        if community is None:
            raise CommunityError(CommunityErrorCode.COMMUNITY_NOT_FOUND)

        activity = self._activity_repository
        online_since = datetime.now(timezone.utc) - ONLINE_WINDOW
        return CommunityStatsDto(
            community_id=community.id,
            total_members=await activity.count_members(community.id),
            online_members=await activity.count_members(community.id, seen_since=online_since),
            total_admins=await activity.count_members(community.id, role=Role.ADMIN),
            total_posts=await activity.count_published_posts(community.id),
            total_comments=await activity.count_comments(community.id),
        )
