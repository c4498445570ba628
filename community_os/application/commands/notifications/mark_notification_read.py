from dataclasses import dataclass

from community_os.application.common.errors import translate_errors
from community_os.application.common.interfaces import Command, CommandHandler
from community_os.application.dto import NotificationDto
from community_os.application.errors import NotificationError, NotificationErrorCode
from community_os.application.mappers import to_notification_dto
from community_os.domain.ports.repositories import NotificationRepository


@dataclass(frozen=True)
class MarkNotificationReadCommand(Command[NotificationDto]):
    notification_id: str
    user_id: str


class MarkNotificationReadHandler(CommandHandler[NotificationDto]):
    def __init__(self, notification_repository: NotificationRepository):
        self._notification_repository = notification_repository

    @translate_errors(NotificationError)
    async def execute(self, command: MarkNotificationReadCommand) -> NotificationDto:
        if not command.notification_id:
            raise NotificationError(
                NotificationErrorCode.INVALID_INPUT, "Notification ID is required"
            )
        if not command.user_id:
            raise NotificationError(NotificationErrorCode.USER_ID_REQUIRED)

        notification = await self._notification_repository.find_by_id(command.notification_id)
        if notification is None:
            raise NotificationError(NotificationErrorCode.NOTIFICATION_NOT_FOUND)
        if notification.user_id != command.user_id:
            raise NotificationError(NotificationErrorCode.NOT_OWNED_BY_USER)

        notification.mark_as_read()
        updated = await self._notification_repository.update(notification)
        return to_notification_dto(updated)
