"""
Course Entity - Instructor-owned lesson container; drafts until published.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional
from uuid import uuid4

from community_os.domain.exceptions import DomainValidationError


@dataclass
class Course:
    id: str
    community_id: str
    title: str
    description: str
    instructor_id: str
    created_at: datetime
    updated_at: datetime
    is_published: bool = False
    published_at: Optional[datetime] = None
    payment_tier_id: Optional[str] = None
    deleted_at: Optional[datetime] = None

    def __post_init__(self):
        self._validate_title(self.title)
        self._validate_description(self.description)

    @classmethod
    def create(
        cls,
        community_id: str,
        title: str,
        description: str,
        instructor_id: str,
        payment_tier_id: Optional[str] = None,
    ) -> "Course":
        now = datetime.now(timezone.utc)
        return cls(
            id=str(uuid4()),
            community_id=community_id,
            title=title,
            description=description,
            instructor_id=instructor_id,
            created_at=now,
            updated_at=now,
            payment_tier_id=payment_tier_id,
        )

    @property
    def is_archived(self) -> bool:
        return self.deleted_at is not None

    def is_instructor(self, user_id: str) -> bool:
        return self.instructor_id == user_id

    def update(self, title: Optional[str] = None, description: Optional[str] = None) -> None:
        self._ensure_not_archived()
        if title is not None:
            self._validate_title(title)
            self.title = title
        if description is not None:
            self._validate_description(description)
            self.description = description
        self.updated_at = datetime.now(timezone.utc)

    def publish(self) -> None:
        self._ensure_not_archived()
        if self.is_published:
            raise DomainValidationError("Course is already published", field="published")
        self.is_published = True
        self.published_at = datetime.now(timezone.utc)
        self.updated_at = self.published_at

    def archive(self) -> None:
        if self.is_archived:
            raise DomainValidationError("Course is already archived", field="archived")
        if self.is_published:
            raise DomainValidationError(
                "Cannot archive a published course", field="published"
            )
        self.deleted_at = datetime.now(timezone.utc)
        self.updated_at = self.deleted_at

    def _ensure_not_archived(self) -> None:
        if self.is_archived:
            raise DomainValidationError("Cannot modify archived course", field="archived")

    @staticmethod
    def _validate_title(title: str) -> None:
        trimmed = (title or "").strip()
        if not trimmed:
            raise DomainValidationError("Course title is required", field="title")
        if len(trimmed) < 3 or len(trimmed) > 200:
            raise DomainValidationError(
                "Course title must be between 3 and 200 characters", field="title"
            )

    @staticmethod
    def _validate_description(description: str) -> None:
        trimmed = (description or "").strip()
        if not trimmed:
            raise DomainValidationError("Course description is required", field="description")
        if len(trimmed) < 10 or len(trimmed) > 5000:
            raise DomainValidationError(
                "Course description must be between 10 and 5000 characters",
                field="description",
            )
