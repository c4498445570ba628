from dataclasses import dataclass

from community_os.application.common.errors import translate_errors
from community_os.application.common.interfaces import Command, CommandHandler
from community_os.application.errors import NotificationError, NotificationErrorCode
from community_os.domain.ports.repositories import NotificationRepository


@dataclass(frozen=True)
class MarkAllReadCommand(Command[int]):
    user_id: str


class MarkAllReadHandler(CommandHandler[int]):
    def __init__(self, notification_repository: NotificationRepository):
        self._notification_repository = notification_repository

    @translate_errors(NotificationError)
    async def execute(self, command: MarkAllReadCommand) -> int:
        """Returns the number of notifications that changed."""
        if not command.user_id or not command.user_id.strip():
            raise NotificationError(NotificationErrorCode.USER_ID_REQUIRED)
        return await self._notification_repository.mark_all_read(command.user_id)
