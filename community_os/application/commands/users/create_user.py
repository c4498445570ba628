from dataclasses import dataclass
from typing import Optional

from community_os.application.common.errors import translate_errors
from community_os.application.common.interfaces import Command, CommandHandler
from community_os.application.dto import UserDto
from community_os.application.errors import UserError, UserErrorCode
from community_os.application.mappers import to_user_dto
from community_os.domain.entities import User
from community_os.domain.ports.repositories import UserRepository
from community_os.domain.value_objects import Email, Role


@dataclass(frozen=True)
class CreateUserCommand(Command[UserDto]):
    email: str
    role: str
    community_id: str
    name: Optional[str] = None
    avatar_url: Optional[str] = None
    # Identity-provider subject; generated when absent
    user_id: Optional[str] = None


class CreateUserHandler(CommandHandler[UserDto]):
    _user_repository: UserRepository

    def __init__(self, user_repository: UserRepository):
        self._user_repository = user_repository

    @translate_errors(UserError)
    async def execute(self, command: CreateUserCommand) -> UserDto:
        if not command.email or not command.community_id:
            raise UserError(UserErrorCode.INVALID_INPUT, "Email and community ID are required")

        email = Email(command.email)
        if await self._user_repository.find_by_email(email.value) is not None:
            raise UserError(UserErrorCode.EMAIL_ALREADY_EXISTS)
        if command.user_id and await self._user_repository.find_by_id(command.user_id):
            raise UserError(UserErrorCode.INVALID_INPUT, "User ID is already taken")

        user = User.create(
            email=email.value,
            role=Role.parse(command.role),
            community_id=command.community_id,
            name=command.name,
            avatar_url=command.avatar_url,
            user_id=command.user_id,
        )
        created = await self._user_repository.create(user)
        return to_user_dto(created)
