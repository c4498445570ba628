from dataclasses import dataclass

from community_os.application.common.errors import translate_errors
from community_os.application.common.interfaces import Query, QueryHandler
from community_os.application.dto import UserDto
from community_os.application.errors import UserError, UserErrorCode
from community_os.application.mappers import to_user_dto
from community_os.domain.ports.repositories import UserRepository


@dataclass(frozen=True)
class ListUsersQuery(Query[list[UserDto]]):
    community_id: str


class ListUsersHandler(QueryHandler[list[UserDto]]):
    def __init__(self, user_repository: UserRepository):
        self._user_repository = user_repository

    @translate_errors(UserError)
    async def execute(self, query: ListUsersQuery) -> list[UserDto]:
        if not query.community_id or not query.community_id.strip():
            raise UserError(UserErrorCode.INVALID_INPUT, "Community ID is required")
        users = await self._user_repository.find_by_community_id(query.community_id)
        return [to_user_dto(user) for user in users]
