from dataclasses import dataclass
from typing import Optional

from community_os.application.common.errors import translate_errors
from community_os.application.common.interfaces import Query, QueryHandler
from community_os.application.dto import SpaceDto
from community_os.application.errors import SpaceError, SpaceErrorCode
from community_os.application.mappers import to_space_dto
from community_os.domain.ports.repositories import SpaceRepository


@dataclass(frozen=True)
class ListSpacesQuery(Query[list[SpaceDto]]):
    community_id: str
    parent_space_id: Optional[str] = None


class ListSpacesHandler(QueryHandler[list[SpaceDto]]):
    def __init__(self, space_repository: SpaceRepository):
        self._space_repository = space_repository

    @translate_errors(SpaceError)
    async def execute(self, query: ListSpacesQuery) -> list[SpaceDto]:
        if not query.community_id:
            raise SpaceError(SpaceErrorCode.INVALID_INPUT, "Community ID is required")
        if query.parent_space_id:
            spaces = await self._space_repository.find_children(query.parent_space_id)
            spaces = [s for s in spaces if s.community_id == query.community_id]
        else:
            spaces = await self._space_repository.find_root_spaces(query.community_id)
        return [to_space_dto(space) for space in spaces]
