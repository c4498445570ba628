from dataclasses import dataclass

from community_os.application.common.errors import translate_errors
from community_os.application.common.interfaces import Query, QueryHandler
from community_os.application.dto import CommunityDto
from community_os.application.errors import CommunityError
from community_os.application.mappers import to_community_dto
from community_os.domain.ports.repositories import CommunityRepository


@dataclass(frozen=True)
class ListCommunitiesQuery(Query[list[CommunityDto]]):
    pass


class ListCommunitiesHandler(QueryHandler[list[CommunityDto]]):
    def __init__(self, community_repository: CommunityRepository):
        self._community_repository = community_repository

    @translate_errors(CommunityError)
    async def execute(self, query: ListCommunitiesQuery) -> list[CommunityDto]:
        communities = await self._community_repository.find_all()
        return [to_community_dto(community) for community in communities]
