"""
List Members Query - Paginated member directory.

sort_by: name | joinedAt | lastActiveAt (default joinedAt)
sort_order: asc | desc (default desc)
"""

import math
from dataclasses import dataclass
from datetime import datetime, timezone

from community_os.application.common.errors import translate_errors
from community_os.application.common.interfaces import Query, QueryHandler
from community_os.application.dto import MemberPageDto, PaginationDto
from community_os.application.errors import UserError, UserErrorCode
from community_os.application.mappers import to_member_dto
from community_os.domain.ports.repositories import (
    ActivityRepository,
    CommunityRepository,
    UserRepository,
)

SORT_COLUMNS = {"name": "name", "joinedAt": "created_at", "lastActiveAt": "updated_at"}
MAX_PAGE_SIZE = 100


@dataclass(frozen=True)
class ListMembersQuery(Query[MemberPageDto]):
    community_id: str
    page: int = 1
    limit: int = 20
    sort_by: str = "joinedAt"
    sort_order: str = "desc"


class ListMembersHandler(QueryHandler[MemberPageDto]):
    def __init__(
        self,
        user_repository: UserRepository,
        community_repository: CommunityRepository,
        activity_repository: ActivityRepository,
    ):
        self._user_repository = user_repository
        self._community_repository = community_repository
        self._activity_repository = activity_repository

    @translate_errors(UserError)
    async def execute(self, query: ListMembersQuery) -> MemberPageDto:
        if not query.community_id or not query.community_id.strip():
            raise UserError(UserErrorCode.INVALID_INPUT, "Community ID is required")
        if query.page < 1:
            raise UserError(UserErrorCode.INVALID_INPUT, "Page must be at least 1")
        if not 1 <= query.limit <= MAX_PAGE_SIZE:
            raise UserError(
                UserErrorCode.INVALID_INPUT, f"Limit must be between 1 and {MAX_PAGE_SIZE}"
            )
        if query.sort_by not in SORT_COLUMNS or query.sort_order not in ("asc", "desc"):
            raise UserError(UserErrorCode.INVALID_INPUT, "Unsupported sort")

        community = await self._community_repository.find_by_id(query.community_id)
        if community is None or community.is_archived:
            raise UserError(UserErrorCode.COMMUNITY_NOT_FOUND)

        total = await self._user_repository.count_by_community_id(community.id)
        members = await self._user_repository.find_page(
            community.id,
            sort_column=SORT_COLUMNS[query.sort_by],
            descending=query.sort_order == "desc",
            offset=(query.page - 1) * query.limit,
            limit=query.limit,
        )
        posts = await self._activity_repository.posts_by_author(community.id)
        now = datetime.now(timezone.utc)

        return MemberPageDto(
            members=[to_member_dto(m, posts.get(m.id, 0), now) for m in members],
            pagination=PaginationDto(
                total=total,
                page=query.page,
                limit=query.limit,
                total_pages=math.ceil(total / query.limit),
            ),
        )
