"""
Notification Entity - In-app notice addressed to one user.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Optional
from uuid import uuid4

from community_os.domain.exceptions import DomainValidationError

MAX_MESSAGE_LENGTH = 500


class NotificationType(str, Enum):
    MENTION = "MENTION"
    REPLY = "REPLY"
    NEW_POST = "NEW_POST"
    LIKE = "LIKE"
    COMMENT_ON_POST = "COMMENT_ON_POST"


@dataclass
class Notification:
    id: str
    user_id: str
    community_id: str
    type: NotificationType
    message: str
    created_at: datetime
    link_url: Optional[str] = None
    actor_id: Optional[str] = None
    is_read: bool = False
    deleted_at: Optional[datetime] = None

    def __post_init__(self):
        try:
            self.type = NotificationType(self.type)
        except ValueError:
            raise DomainValidationError(f"Invalid notification type: {self.type}", field="type")
        if not self.message or not self.message.strip():
            raise DomainValidationError("Notification message cannot be empty", field="message")
        if len(self.message) > MAX_MESSAGE_LENGTH:
            raise DomainValidationError(
                "Notification message too long (max 500 characters)", field="message"
            )

    @classmethod
    def create(
        cls,
        user_id: str,
        community_id: str,
        type: str,
        message: str,
        link_url: Optional[str] = None,
        actor_id: Optional[str] = None,
    ) -> "Notification":
        return cls(
            id=str(uuid4()),
            user_id=user_id,
            community_id=community_id,
            type=type,
            message=message,
            created_at=datetime.now(timezone.utc),
            link_url=link_url,
            actor_id=actor_id,
        )

    @property
    def is_archived(self) -> bool:
        return self.deleted_at is not None

    def mark_as_read(self) -> None:
        if self.is_archived:
            raise DomainValidationError("Cannot modify archived notification", field="archived")
        if self.is_read:
            raise DomainValidationError(
                "Notification is already marked as read", field="already_read"
            )
        self.is_read = True

    def archive(self) -> None:
        if self.is_archived:
            raise DomainValidationError("Notification is already archived", field="archived")
        self.deleted_at = datetime.now(timezone.utc)
