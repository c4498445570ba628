from typing import Any, Dict, Optional

from prisma import Prisma
from prisma.models import Notification as PrismaNotification

from community_os.domain.entities import Notification, NotificationType
from community_os.domain.ports.repositories import NotificationRepository


class PrismaNotificationRepository(NotificationRepository):
    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        self._prisma = prisma

    def _to_entity(self, record: PrismaNotification) -> Notification:
        return Notification(
            id=record.id,
            user_id=record.user_id,
            community_id=record.community_id,
            type=NotificationType(record.type),
            message=record.message,
            created_at=record.created_at,
            link_url=record.link_url,
            actor_id=record.actor_id,
            is_read=record.is_read,
            deleted_at=record.deleted_at,
        )

    def _to_data(self, notification: Notification) -> Dict[str, Any]:
        return {
            "user_id": notification.user_id,
            "community_id": notification.community_id,
            "type": notification.type.value,
            "message": notification.message,
            "link_url": notification.link_url,
            "actor_id": notification.actor_id,
            "is_read": notification.is_read,
            "created_at": notification.created_at,
            "deleted_at": notification.deleted_at,
        }

    async def create(self, notification: Notification) -> Notification:
        record = await self._prisma.notification.create(
            data={"id": notification.id, **self._to_data(notification)}
        )
        return self._to_entity(record)

    async def find_by_id(self, notification_id: str) -> Optional[Notification]:
        record = await self._prisma.notification.find_unique(where={"id": notification_id})
        return self._to_entity(record) if record else None

    async def find_by_user_id(self, user_id: str, limit: int) -> list[Notification]:
        records = await self._prisma.notification.find_many(
            where={"user_id": user_id, "deleted_at": None},
            order=[{"is_read": "asc"}, {"created_at": "desc"}],
            take=limit,
        )
        return [self._to_entity(r) for r in records]

    async def count_unread(self, user_id: str) -> int:
        return await self._prisma.notification.count(
            where={"user_id": user_id, "deleted_at": None, "is_read": False}
        )

    async def mark_all_read(self, user_id: str) -> int:
        return await self._prisma.notification.update_many(
            where={"user_id": user_id, "deleted_at": None, "is_read": False},
            data={"is_read": True},
        )

    async def update(self, notification: Notification) -> Notification:
        record = await self._prisma.notification.update(
            where={"id": notification.id},
            data=self._to_data(notification),
        )
        return self._to_entity(record) if record else notification
