"""
Create Notification Command.

Also used internally by the post and comment use cases (mentions, replies).
The email copy is best effort: EmailSender reports failure instead of raising.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from community_os.application.common.errors import translate_errors
from community_os.application.common.interfaces import Command, CommandHandler
from community_os.application.dto import NotificationDto
from community_os.application.errors import NotificationError, NotificationErrorCode
from community_os.application.mappers import to_notification_dto
from community_os.domain.entities import Notification
from community_os.domain.ports.repositories import NotificationRepository, UserRepository
from community_os.domain.ports.services import EmailSender
from community_os.observability.metrics import increment_notification

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CreateNotificationCommand(Command[NotificationDto]):
    user_id: str
    community_id: str
    type: str
    message: str
    link_url: Optional[str] = None
    actor_id: Optional[str] = None


class CreateNotificationHandler(CommandHandler[NotificationDto]):
    def __init__(
        self,
        notification_repository: NotificationRepository,
        user_repository: UserRepository,
        email_sender: EmailSender,
    ):
        self._notification_repository = notification_repository
        self._user_repository = user_repository
        self._email_sender = email_sender

    @translate_errors(NotificationError)
    async def execute(self, command: CreateNotificationCommand) -> NotificationDto:
        if not command.user_id or not command.user_id.strip():
            raise NotificationError(NotificationErrorCode.USER_ID_REQUIRED)
        if not command.community_id or not command.type:
            raise NotificationError(
                NotificationErrorCode.INVALID_INPUT, "Community ID and type are required"
            )

        user = await self._user_repository.find_by_id(command.user_id)
        if user is None:
            raise NotificationError(NotificationErrorCode.USER_NOT_FOUND)

        actor_name = None
        if command.actor_id:
            actor = await self._user_repository.find_by_id(command.actor_id)
            if actor is None:
                raise NotificationError(NotificationErrorCode.ACTOR_NOT_FOUND)
            actor_name = actor.display_name

        notification = Notification.create(
            user_id=command.user_id,
            community_id=command.community_id,
            type=command.type,
            message=command.message,
            link_url=command.link_url,
            actor_id=command.actor_id,
        )
        created = await self._notification_repository.create(notification)
        increment_notification(created.type.value)

        sent = await self._email_sender.send(
            to_address=user.email.value,
            subject="New notification",
            body=created.message,
        )
        if not sent:
            logger.debug(f"[NOTIFICATIONS] Email copy not sent for {created.id}")

        return to_notification_dto(created, actor_name)


async def notify_safely(
    handler: CreateNotificationHandler, command: CreateNotificationCommand
) -> bool:
    """Side-channel notification: failures are logged, never raised."""
    try:
        await handler.execute(command)
        return True
    except NotificationError as exc:
        logger.warning(
            f"[NOTIFICATIONS] {command.type} for user {command.user_id} not created: "
            f"{exc.code.value}"
        )
        return False
