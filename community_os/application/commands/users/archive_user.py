from dataclasses import dataclass

from community_os.application.common.errors import translate_errors
from community_os.application.common.interfaces import Command, CommandHandler
from community_os.application.dto import UserDto
from community_os.application.errors import UserError, UserErrorCode
from community_os.application.mappers import to_user_dto
from community_os.domain.ports.repositories import UserRepository


@dataclass(frozen=True)
class ArchiveUserCommand(Command[UserDto]):
    user_id: str


class ArchiveUserHandler(CommandHandler[UserDto]):
    def __init__(self, user_repository: UserRepository):
        self._user_repository = user_repository

    @translate_errors(UserError)
    async def execute(self, command: ArchiveUserCommand) -> UserDto:
        user = await self._user_repository.find_by_id(command.user_id)
        if user is None:
            raise UserError(UserErrorCode.USER_NOT_FOUND)
        if user.is_archived:
            raise UserError(UserErrorCode.USER_ALREADY_ARCHIVED)

        user.archive()
        await self._user_repository.delete(user.id)
        return to_user_dto(user)
