from dataclasses import dataclass

from community_os.application.common.errors import translate_errors
from community_os.application.common.interfaces import Query, QueryHandler
from community_os.application.dto import CommunityDto
from community_os.application.errors import CommunityError, CommunityErrorCode
from community_os.application.mappers import to_community_dto
from community_os.domain.ports.repositories import CommunityRepository


@dataclass(frozen=True)
class GetCommunityQuery(Query[CommunityDto]):
    community_id: str


class GetCommunityHandler(QueryHandler[CommunityDto]):
    def __init__(self, community_repository: CommunityRepository):
        self._community_repository = community_repository

    @translate_errors(CommunityError)
    async def execute(self, query: GetCommunityQuery) -> CommunityDto:
        if not query.community_id or not query.community_id.strip():
            raise CommunityError(CommunityErrorCode.INVALID_INPUT, "Community ID is required")
        community = await self._community_repository.find_by_id(query.community_id)
        if community is None:
            raise CommunityError(CommunityErrorCode.COMMUNITY_NOT_FOUND)
        return to_community_dto(community)
