"""
Post Entity - A forum thread. A post with no published_at is a draft.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional
from uuid import uuid4

from community_os.domain.entities.content_version import ContentType, ContentVersion
from community_os.domain.exceptions import DomainValidationError
from community_os.domain.services import extract_mention_ids, strip_html

MIN_TITLE_LENGTH = 3
MAX_TITLE_LENGTH = 200
MIN_CONTENT_LENGTH = 10


@dataclass
class Post:
    id: str
    community_id: str
    author_id: str
    title: str
    content: str
    created_at: datetime
    updated_at: datetime
    published_at: Optional[datetime] = None
    is_pinned: bool = False
    is_solved: bool = False
    like_count: int = 0
    helpful_count: int = 0
    comment_count: int = 0
    view_count: int = 0
    payment_tier_id: Optional[str] = None
    deleted_at: Optional[datetime] = None

    def __post_init__(self):
        self._validate_title(self.title)
        self._validate_content(self.content)

    @classmethod
    def create(
        cls,
        community_id: str,
        author_id: str,
        title: str,
        content: str,
        payment_tier_id: Optional[str] = None,
    ) -> "Post":
        now = datetime.now(timezone.utc)
        return cls(
            id=str(uuid4()),
            community_id=community_id,
            author_id=author_id,
            title=title.strip() if title else title,
            content=content,
            created_at=now,
            updated_at=now,
            payment_tier_id=payment_tier_id,
        )

    @property
    def is_archived(self) -> bool:
        return self.deleted_at is not None

    @property
    def is_published(self) -> bool:
        return self.published_at is not None

    def update(self, title: Optional[str] = None, content: Optional[str] = None) -> None:
        self._ensure_not_archived()
        if title is not None:
            self._validate_title(title)
            self.title = title.strip()
        if content is not None:
            self._validate_content(content)
            self.content = content
        self.updated_at = datetime.now(timezone.utc)

    def publish(self) -> None:
        self._ensure_not_archived()
        if self.is_published:
            raise DomainValidationError("Post is already published", field="published")
        self.published_at = datetime.now(timezone.utc)
        self.updated_at = self.published_at

    def pin(self) -> None:
        self._ensure_not_archived()
        if not self.is_published:
            raise DomainValidationError("Only published posts can be pinned", field="unpublished")
        if self.is_pinned:
            raise DomainValidationError("Post is already pinned", field="pinned")
        self.is_pinned = True
        self.updated_at = datetime.now(timezone.utc)

    def unpin(self) -> None:
        self._ensure_not_archived()
        if not self.is_pinned:
            raise DomainValidationError("Post is not pinned", field="not_pinned")
        self.is_pinned = False
        self.updated_at = datetime.now(timezone.utc)

    def mark_solved(self) -> None:
        self._ensure_not_archived()
        if not self.is_published:
            raise DomainValidationError(
                "Only published posts can be marked solved", field="unpublished"
            )
        self.is_solved = True
        self.updated_at = datetime.now(timezone.utc)

    def mark_unsolved(self) -> None:
        self._ensure_not_archived()
        self.is_solved = False
        self.updated_at = datetime.now(timezone.utc)

    def increment_like_count(self) -> None:
        self.like_count += 1

    def decrement_like_count(self) -> None:
        self.like_count = max(0, self.like_count - 1)

    def increment_view_count(self) -> None:
        self.view_count += 1

    def increment_comment_count(self) -> None:
        self.comment_count += 1

    def decrement_comment_count(self) -> None:
        self.comment_count = max(0, self.comment_count - 1)

    def mentioned_user_ids(self) -> list[str]:
        return extract_mention_ids(self.content)

    def create_version_snapshot(self, version_number: int) -> ContentVersion:
        return ContentVersion.create(ContentType.POST, self.id, self.content, version_number)

    def archive(self) -> None:
        if self.is_archived:
            raise DomainValidationError("Post is already archived", field="archived")
        self.deleted_at = datetime.now(timezone.utc)
        self.updated_at = self.deleted_at

    def _ensure_not_archived(self) -> None:
        if self.is_archived:
            raise DomainValidationError("Cannot modify archived post", field="archived")

    @staticmethod
    def _validate_title(title: str) -> None:
        trimmed = (title or "").strip()
        if len(trimmed) < MIN_TITLE_LENGTH or len(trimmed) > MAX_TITLE_LENGTH:
            raise DomainValidationError(
                "Invalid title: must be between 3 and 200 characters", field="title"
            )

    @staticmethod
    def _validate_content(content: str) -> None:
        if len(strip_html(content)) < MIN_CONTENT_LENGTH:
            raise DomainValidationError(
                "Invalid content: must be at least 10 characters", field="content"
            )
