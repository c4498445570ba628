"""
Notification Repository Port - Interface for notification persistence.
"""

from abc import ABC, abstractmethod
from typing import Optional
from community_os.domain.entities.notification import Notification


class NotificationRepository(ABC):
    @abstractmethod
    async def create(self, notification: Notification) -> Notification: ...

    @abstractmethod
    async def find_by_id(self, notification_id: str) -> Optional[Notification]: ...

    @abstractmethod
    async def find_by_user_id(self, user_id: str, limit: int) -> list[Notification]:
        """Non-archived notifications, unread first, then newest first."""
        ...

    @abstractmethod
    async def count_unread(self, user_id: str) -> int: ...

    @abstractmethod
    async def mark_all_read(self, user_id: str) -> int:
        """Mark every unread notification read; returns how many changed."""
        ...

    @abstractmethod
    async def update(self, notification: Notification) -> Notification: ...
