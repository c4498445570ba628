from dataclasses import dataclass

from community_os.application.common.errors import translate_errors
from community_os.application.common.interfaces import Command, CommandHandler
from community_os.application.dto import UserDto
from community_os.application.errors import UserError, UserErrorCode
from community_os.application.mappers import to_user_dto
from community_os.domain.ports.repositories import UserRepository
from community_os.domain.value_objects import Role


@dataclass(frozen=True)
class ChangeUserRoleCommand(Command[UserDto]):
    user_id: str
    role: str


class ChangeUserRoleHandler(CommandHandler[UserDto]):
    def __init__(self, user_repository: UserRepository):
        self._user_repository = user_repository

    @translate_errors(UserError)
    async def execute(self, command: ChangeUserRoleCommand) -> UserDto:
        role = Role.parse(command.role)
        user = await self._user_repository.find_by_id(command.user_id)
        if user is None:
            raise UserError(UserErrorCode.USER_NOT_FOUND)

        user.change_role(role)
        updated = await self._user_repository.update(user)
        return to_user_dto(updated)
