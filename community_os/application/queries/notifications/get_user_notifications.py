from dataclasses import dataclass

from community_os.application.common.errors import translate_errors
from community_os.application.common.interfaces import Query, QueryHandler
from community_os.application.dto import NotificationDto
from community_os.application.errors import NotificationError, NotificationErrorCode
from community_os.application.mappers import to_notification_dto
from community_os.domain.ports.repositories import NotificationRepository, UserRepository


@dataclass(frozen=True)
class GetUserNotificationsQuery(Query[list[NotificationDto]]):
    user_id: str
    limit: int = 50


class GetUserNotificationsHandler(QueryHandler[list[NotificationDto]]):
    def __init__(
        self,
        notification_repository: NotificationRepository,
        user_repository: UserRepository,
    ):
        self._notification_repository = notification_repository
        self._user_repository = user_repository

    @translate_errors(NotificationError)
    async def execute(self, query: GetUserNotificationsQuery) -> list[NotificationDto]:
        if not query.user_id or not query.user_id.strip():
            raise NotificationError(NotificationErrorCode.USER_ID_REQUIRED)
        if query.limit < 1:
            raise NotificationError(NotificationErrorCode.INVALID_INPUT, "Limit must be positive")

        notifications = await self._notification_repository.find_by_user_id(
            query.user_id, query.limit
        )

        actor_names: dict[str, str] = {}
        for notification in notifications:
            actor_id = notification.actor_id
            if actor_id and actor_id not in actor_names:
                actor = await self._user_repository.find_by_id(actor_id)
                actor_names[actor_id] = actor.display_name if actor else "Unknown"

        return [
            to_notification_dto(n, actor_names.get(n.actor_id) if n.actor_id else None)
            for n in notifications
        ]
