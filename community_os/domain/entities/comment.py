"""
Comment Entity - A reply on a post; parent_id allows one level of threading.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional
from uuid import uuid4

from community_os.domain.entities.content_version import ContentType, ContentVersion
from community_os.domain.exceptions import DomainValidationError
from community_os.domain.services import extract_mention_ids, strip_html


@dataclass
class Comment:
    id: str
    post_id: str
    author_id: str
    content: str
    created_at: datetime
    updated_at: datetime
    parent_id: Optional[str] = None
    like_count: int = 0
    helpful_count: int = 0
    deleted_at: Optional[datetime] = None

    def __post_init__(self):
        self._validate_content(self.content)

    @classmethod
    def create(
        cls, post_id: str, author_id: str, content: str, parent_id: Optional[str] = None
    ) -> "Comment":
        now = datetime.now(timezone.utc)
        return cls(
            id=str(uuid4()),
            post_id=post_id,
            author_id=author_id,
            content=content,
            created_at=now,
            updated_at=now,
            parent_id=parent_id,
        )

    @property
    def is_archived(self) -> bool:
        return self.deleted_at is not None

    @property
    def is_reply(self) -> bool:
        return self.parent_id is not None

    def update_content(self, content: str) -> None:
        self._ensure_not_archived()
        self._validate_content(content)
        self.content = content
        self.updated_at = datetime.now(timezone.utc)

    def increment_like_count(self) -> None:
        self.like_count += 1

    def decrement_like_count(self) -> None:
        self.like_count = max(0, self.like_count - 1)

    def mentioned_user_ids(self) -> list[str]:
        return extract_mention_ids(self.content)

    def create_version_snapshot(self, version_number: int) -> ContentVersion:
        return ContentVersion.create(
            ContentType.COMMENT, self.id, self.content, version_number
        )

    def archive(self) -> None:
        if self.is_archived:
            raise DomainValidationError("Comment is already archived", field="archived")
        self.deleted_at = datetime.now(timezone.utc)
        self.updated_at = self.deleted_at

    def restore(self) -> None:
        if not self.is_archived:
            raise DomainValidationError("Comment is not archived", field="not_archived")
        self.deleted_at = None
        self.updated_at = datetime.now(timezone.utc)

    def _ensure_not_archived(self) -> None:
        if self.is_archived:
            raise DomainValidationError("Cannot modify archived comment", field="archived")

    @staticmethod
    def _validate_content(content: str) -> None:
        if not content or not content.strip():
            raise DomainValidationError("Comment content is required", field="content")
        if len(strip_html(content)) < 1:
            raise DomainValidationError(
                "Comment content must contain visible text", field="content_too_short"
            )
