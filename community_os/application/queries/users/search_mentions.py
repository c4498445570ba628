from dataclasses import dataclass

from community_os.application.common.errors import translate_errors
from community_os.application.common.interfaces import Query, QueryHandler
from community_os.application.dto import MentionCandidateDto
from community_os.application.errors import UserError, UserErrorCode
from community_os.application.mappers import to_mention_candidate_dto
from community_os.domain.ports.repositories import CommunityRepository, UserRepository

MAX_MENTION_RESULTS = 10


@dataclass(frozen=True)
class SearchMentionsQuery(Query[list[MentionCandidateDto]]):
    """Autocomplete for @mentions: members whose first or later name starts with q."""

    community_id: str
    q: str


class SearchMentionsHandler(QueryHandler[list[MentionCandidateDto]]):
    def __init__(
        self,
        user_repository: UserRepository,
        community_repository: CommunityRepository,
    ):
        self._user_repository = user_repository
        self._community_repository = community_repository

    @translate_errors(UserError)
    async def execute(self, query: SearchMentionsQuery) -> list[MentionCandidateDto]:
        prefix = (query.q or "").strip()
        if not prefix or not query.community_id:
            raise UserError(UserErrorCode.INVALID_INPUT, "Missing query or communityId")

        community = await self._community_repository.find_by_id(query.community_id)
        if community is None or community.is_archived:
            raise UserError(UserErrorCode.COMMUNITY_NOT_FOUND)

        users = await self._user_repository.find_by_name_prefix(
            community.id, prefix, MAX_MENTION_RESULTS
        )
        return [to_mention_candidate_dto(user) for user in users]
