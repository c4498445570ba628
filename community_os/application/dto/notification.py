"""Notification DTOs."""

from typing import Optional

from community_os.application.dto.base import CamelModel


class NotificationDto(CamelModel):
    id: str
    user_id: str
    community_id: str
    type: str
    message: str
    link_url: Optional[str] = None
    actor_id: Optional[str] = None
    actor_name: Optional[str] = None
    is_read: bool
    created_at: str
    deleted_at: Optional[str] = None


class UnreadCountDto(CamelModel):
    count: int
