"""
Get User Query.

Blank ids are rejected before the repository is touched.
"""

from dataclasses import dataclass

from community_os.application.common.errors import translate_errors
from community_os.application.common.interfaces import Query, QueryHandler
from community_os.application.dto import UserDto
from community_os.application.errors import UserError, UserErrorCode
from community_os.application.mappers import to_user_dto
from community_os.domain.ports.repositories import UserRepository


@dataclass(frozen=True)
class GetUserQuery(Query[UserDto]):
    user_id: str


class GetUserHandler(QueryHandler[UserDto]):
    def __init__(self, user_repository: UserRepository):
        self._user_repository = user_repository

    @translate_errors(UserError)
    async def execute(self, query: GetUserQuery) -> UserDto:
        if not query.user_id or not query.user_id.strip():
            raise UserError(UserErrorCode.INVALID_INPUT, "User ID is required")
        user = await self._user_repository.find_by_id(query.user_id)
        if user is None:
            raise UserError(UserErrorCode.USER_NOT_FOUND)
        return to_user_dto(user)
