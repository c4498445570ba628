"""
Get Leaderboard Query - Top members by engagement points.

    points = 5 x published posts + 2 x comments + 1 x likes given

Periods: "week" (last 7 days), "month" (last 30 days), "all-time".
Members with equal points keep join order.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from community_os.application.common.errors import translate_errors
from community_os.application.common.interfaces import Query, QueryHandler
from community_os.application.dto import LeaderboardDto, LeaderboardEntryDto
from community_os.application.errors import CommunityError, CommunityErrorCode
from community_os.application.mappers import to_iso
from community_os.domain.ports.repositories import (
    ActivityRepository,
    CommunityRepository,
    UserRepository,
)

POST_POINTS = 5
COMMENT_POINTS = 2
LIKE_POINTS = 1

PERIODS = {
    "week": timedelta(days=7),
    "month": timedelta(days=30),
    "all-time": None,
}
DEFAULT_LIMIT = 5
MAX_LIMIT = 100


@dataclass(frozen=True)
class GetLeaderboardQuery(Query[LeaderboardDto]):
    community_id: str
    limit: int = DEFAULT_LIMIT
    period: str = "all-time"


class GetLeaderboardHandler(QueryHandler[LeaderboardDto]):
    def __init__(
        self,
        community_repository: CommunityRepository,
        user_repository: UserRepository,
        activity_repository: ActivityRepository,
    ):
        self._community_repository = community_repository
        self._user_repository = user_repository
        self._activity_repository = activity_repository

    @translate_errors(CommunityError)
    async def execute(self, query: GetLeaderboardQuery) -> LeaderboardDto:
        if not query.community_id or not query.community_id.strip():
            raise CommunityError(CommunityErrorCode.INVALID_INPUT, "Community ID is required")
        if query.period not in PERIODS:
            raise CommunityError(
                CommunityErrorCode.INVALID_PERIOD, "Period must be week, month or all-time"
            )
        if not 1 <= query.limit <= MAX_LIMIT:
            raise CommunityError(
                CommunityErrorCode.INVALID_LIMIT, f"Limit must be between 1 and {MAX_LIMIT}"
            )
        community = await self._community_repository.find_by_id(query.community_id)
        if community is None:
            raise CommunityError(CommunityErrorCode.COMMUNITY_NOT_FOUND)

        now = datetime.now(timezone.utc)
        window = PERIODS[query.period]
        since = now - window if window else None

        posts = await self._activity_repository.posts_by_author(community.id, since)
        comments = await self._activity_repository.comments_by_author(community.id, since)
        likes = await self._activity_repository.likes_by_user(community.id, since)

        scored = []
        for member in await self._user_repository.find_by_community_id(community.id):
            post_count = posts.get(member.id, 0)
            comment_count = comments.get(member.id, 0)
            like_count = likes.get(member.id, 0)
            points = (
                post_count * POST_POINTS
                + comment_count * COMMENT_POINTS
                + like_count * LIKE_POINTS
            )
            scored.append((member, points, post_count, comment_count, like_count))
        scored.sort(key=lambda row: row[1], reverse=True)

        entries = [
            LeaderboardEntryDto(
                user_id=member.id,
                user_name=member.display_name,
                user_avatar=member.avatar_url,
                points=points,
                post_count=post_count,
                comment_count=comment_count,
                like_count=like_count,
                rank=rank,
            )
            for rank, (member, points, post_count, comment_count, like_count) in enumerate(
                scored[: query.limit], start=1
            )
        ]
        return LeaderboardDto(
            community_id=community.id,
            entries=entries,
            period=query.period,
            generated_at=to_iso(now),
        )
