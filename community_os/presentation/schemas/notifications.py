from typing import Literal, Optional

from community_os.presentation.schemas.base import (
    BoundedText,
    RequestSchema,
    RequiredId,
    UUIDString,
)


class CreateNotificationSchema(RequestSchema):
    user_id: RequiredId("User ID")
    community_id: RequiredId("Community ID")
    type: Literal["MENTION", "REPLY", "NEW_POST", "LIKE", "COMMENT_ON_POST"]
    message: BoundedText("Message", 1, 500)
    link_url: Optional[str] = None
    actor_id: Optional[RequiredId("Actor ID")] = None


class MarkAsReadSchema(RequestSchema):
    notification_id: UUIDString("Notification ID must be a valid UUID")
