"""
PostDraft Entity - Autosaved, expiring work-in-progress for a new or existing post.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional
from uuid import uuid4

from community_os.domain.exceptions import DomainValidationError


@dataclass
class PostDraft:
    id: str
    community_id: str
    author_id: str
    expires_at: datetime
    created_at: datetime
    updated_at: datetime
    post_id: Optional[str] = None
    title: Optional[str] = None
    content: Optional[str] = None

    def __post_init__(self):
        self._validate(self.title, self.content)

    @classmethod
    def create(
        cls,
        community_id: str,
        author_id: str,
        ttl_days: int,
        post_id: Optional[str] = None,
        title: Optional[str] = None,
        content: Optional[str] = None,
    ) -> "PostDraft":
        now = datetime.now(timezone.utc)
        return cls(
            id=str(uuid4()),
            community_id=community_id,
            author_id=author_id,
            expires_at=now + timedelta(days=ttl_days),
            created_at=now,
            updated_at=now,
            post_id=post_id,
            title=title,
            content=content,
        )

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        return (now or datetime.now(timezone.utc)) > self.expires_at

    def update_content(
        self, title: Optional[str], content: Optional[str], ttl_days: int
    ) -> None:
        self._validate(title, content)
        self.title = title
        self.content = content
        self.updated_at = datetime.now(timezone.utc)
        self.expires_at = self.updated_at + timedelta(days=ttl_days)

    @staticmethod
    def _validate(title: Optional[str], content: Optional[str]) -> None:
        if not (title and title.strip()) and not (content and content.strip()):
            raise DomainValidationError("Draft must have a title or content", field="empty")
