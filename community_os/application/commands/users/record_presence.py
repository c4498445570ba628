from dataclasses import dataclass

from community_os.application.common.errors import translate_errors
from community_os.application.common.interfaces import Command, CommandHandler
from community_os.application.dto import UserDto
from community_os.application.errors import UserError, UserErrorCode
from community_os.application.mappers import to_user_dto
from community_os.domain.ports.repositories import UserRepository


@dataclass(frozen=True)
class RecordPresenceCommand(Command[UserDto]):
    user_id: str


class RecordPresenceHandler(CommandHandler[UserDto]):
    """Heartbeat from a signed-in member; drives the online counter."""

    def __init__(self, user_repository: UserRepository):
        self._user_repository = user_repository

    @translate_errors(UserError)
    async def execute(self, command: RecordPresenceCommand) -> UserDto:
        user = await self._user_repository.find_by_id(command.user_id)
        if user is None or user.is_archived:
            raise UserError(UserErrorCode.USER_NOT_FOUND)

        user.mark_seen()
        updated = await self._user_repository.update(user)
        return to_user_dto(updated)
