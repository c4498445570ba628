from typing import Optional

from community_os.application.dto import NotificationDto
from community_os.application.mappers.common import to_iso
from community_os.domain.entities import Notification


def to_notification_dto(
    notification: Notification, actor_name: Optional[str] = None
) -> NotificationDto:
    return NotificationDto(
        id=notification.id,
        user_id=notification.user_id,
        community_id=notification.community_id,
        type=notification.type.value,
        message=notification.message,
        link_url=notification.link_url,
        actor_id=notification.actor_id,
        actor_name=actor_name,
        is_read=notification.is_read,
        created_at=to_iso(notification.created_at),
        deleted_at=to_iso(notification.deleted_at),
    )
