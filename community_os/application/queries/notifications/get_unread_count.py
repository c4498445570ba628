from dataclasses import dataclass

from community_os.application.common.errors import translate_errors
from community_os.application.common.interfaces import Query, QueryHandler
from community_os.application.dto import UnreadCountDto
from community_os.application.errors import NotificationError, NotificationErrorCode
from community_os.domain.ports.repositories import NotificationRepository


@dataclass(frozen=True)
class GetUnreadCountQuery(Query[UnreadCountDto]):
    user_id: str


class GetUnreadCountHandler(QueryHandler[UnreadCountDto]):
    def __init__(self, notification_repository: NotificationRepository):
        self._notification_repository = notification_repository

    @translate_errors(NotificationError)
    async def execute(self, query: GetUnreadCountQuery) -> UnreadCountDto:
        if not query.user_id or not query.user_id.strip():
            raise NotificationError(NotificationErrorCode.USER_ID_REQUIRED)
        count = await self._notification_repository.count_unread(query.user_id)
        return UnreadCountDto(count=count)
