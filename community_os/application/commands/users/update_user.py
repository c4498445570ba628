from dataclasses import dataclass
from typing import Optional

from community_os.application.common.errors import translate_errors
from community_os.application.common.interfaces import Command, CommandHandler
from community_os.application.dto import UserDto
from community_os.application.errors import UserError, UserErrorCode
from community_os.application.mappers import to_user_dto
from community_os.domain.ports.repositories import UserRepository
from community_os.domain.value_objects import Email


@dataclass(frozen=True)
class UpdateUserCommand(Command[UserDto]):
    user_id: str
    email: Optional[str] = None
    name: Optional[str] = None
    avatar_url: Optional[str] = None


class UpdateUserHandler(CommandHandler[UserDto]):
    _user_repository: UserRepository

    def __init__(self, user_repository: UserRepository):
        self._user_repository = user_repository

    @translate_errors(UserError)
    async def execute(self, command: UpdateUserCommand) -> UserDto:
        if not command.user_id or not command.user_id.strip():
            raise UserError(UserErrorCode.INVALID_INPUT, "User ID is required")

        user = await self._user_repository.find_by_id(command.user_id)
        if user is None:
            raise UserError(UserErrorCode.USER_NOT_FOUND)

        if command.email is not None:
            email = Email(command.email)
            if email != user.email:
                existing = await self._user_repository.find_by_email(email.value)
                if existing is not None and existing.id != user.id:
                    raise UserError(UserErrorCode.EMAIL_ALREADY_EXISTS)

        user.update_profile(
            email=command.email, name=command.name, avatar_url=command.avatar_url
        )
        updated = await self._user_repository.update(user)
        return to_user_dto(updated)
