"""
CourseProgress Entity - One learner's completion state for one course.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional
from uuid import uuid4

from community_os.domain.exceptions import DomainValidationError


@dataclass
class CourseProgress:
    id: str
    course_id: str
    user_id: str
    created_at: datetime
    updated_at: datetime
    completed_lesson_ids: list[str] = field(default_factory=list)
    last_accessed_lesson_id: Optional[str] = None
    completion_percentage: int = 0
    completed_at: Optional[datetime] = None

    @classmethod
    def create(cls, course_id: str, user_id: str) -> "CourseProgress":
        now = datetime.now(timezone.utc)
        return cls(
            id=str(uuid4()),
            course_id=course_id,
            user_id=user_id,
            created_at=now,
            updated_at=now,
        )

    @property
    def is_complete(self) -> bool:
        return self.completed_at is not None

    def is_lesson_completed(self, lesson_id: str) -> bool:
        return lesson_id in self.completed_lesson_ids

    def mark_lesson_complete(self, lesson_id: str) -> None:
        if not lesson_id or not lesson_id.strip():
            raise DomainValidationError("Lesson ID cannot be empty", field="lesson_id")
        if self.is_lesson_completed(lesson_id):
            raise DomainValidationError(
                "Lesson is already marked as complete", field="already_completed"
            )
        self.completed_lesson_ids.append(lesson_id)
        self.updated_at = datetime.now(timezone.utc)

    def update_last_accessed(self, lesson_id: str) -> None:
        self.last_accessed_lesson_id = lesson_id
        self.updated_at = datetime.now(timezone.utc)

    def recalculate(self, lesson_ids: list[str]) -> None:
        """Recompute completion against the course's current lesson set."""
        total = len(lesson_ids)
        done = len(set(self.completed_lesson_ids) & set(lesson_ids))
        self.completion_percentage = round(done * 100 / total) if total else 0
        self.updated_at = datetime.now(timezone.utc)

    def mark_course_complete(self) -> None:
        if not self.completed_lesson_ids:
            raise DomainValidationError(
                "Cannot mark course complete with no completed lessons", field="lesson_id"
            )
        if self.is_complete:
            raise DomainValidationError(
                "Course is already marked as complete", field="course_completed"
            )
        self.completed_at = datetime.now(timezone.utc)
        self.updated_at = self.completed_at
