from typing import Optional

from community_os.domain.entities import Notification
from community_os.domain.ports.repositories import NotificationRepository
from community_os.infrastructure.persistence.memory.store import (
    InMemoryStore,
    MemoryTable,
    live,
)


class MemoryNotificationRepository(NotificationRepository):
    def __init__(self, store: InMemoryStore):
        self._table: MemoryTable[Notification] = MemoryTable(store.notifications)

    async def create(self, notification: Notification) -> Notification:
        return self._table.insert(notification)

    async def find_by_id(self, notification_id: str) -> Optional[Notification]:
        return self._table.get(notification_id)

    async def find_by_user_id(self, user_id: str, limit: int) -> list[Notification]:
        notifications = self._table.where(lambda n: n.user_id == user_id and live(n))
        notifications.sort(key=lambda n: n.created_at, reverse=True)
        notifications.sort(key=lambda n: n.is_read)
        return notifications[:limit]

    async def count_unread(self, user_id: str) -> int:
        return self._table.count(lambda n: n.user_id == user_id and live(n) and not n.is_read)

    async def mark_all_read(self, user_id: str) -> int:
        changed = 0
        for notification in self._table.rows():
            if notification.user_id == user_id and live(notification) and not notification.is_read:
                notification.is_read = True
                changed += 1
        return changed

    async def update(self, notification: Notification) -> Notification:
        return self._table.replace(notification)
