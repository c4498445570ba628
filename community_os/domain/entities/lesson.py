"""
Lesson Entity - One unit of a course: text, embedded video or PDF.

Lessons can be drip-scheduled: a lesson with drip_available_at in the
future is listed to the instructor but locked for learners.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Optional
from uuid import uuid4

from community_os.domain.exceptions import DomainValidationError
from community_os.domain.value_objects import is_web_url


class LessonType(str, Enum):
    TEXT = "TEXT"
    VIDEO_EMBED = "VIDEO_EMBED"
    PDF = "PDF"


@dataclass
class Lesson:
    id: str
    course_id: str
    title: str
    content: str
    type: LessonType
    order: int
    created_at: datetime
    updated_at: datetime
    video_url: Optional[str] = None
    pdf_url: Optional[str] = None
    drip_available_at: Optional[datetime] = None
    deleted_at: Optional[datetime] = None

    def __post_init__(self):
        try:
            self.type = LessonType(self.type)
        except ValueError:
            raise DomainValidationError(f"Invalid lesson type: {self.type}", field="type")
        self._validate_title(self.title)
        self._validate_content(self.content, self.type)
        self._validate_order(self.order)
        self._validate_type_fields(self.type, self.video_url, self.pdf_url)

    @classmethod
    def create(
        cls,
        course_id: str,
        title: str,
        content: str,
        type: str,
        order: int,
        video_url: Optional[str] = None,
        pdf_url: Optional[str] = None,
        drip_available_at: Optional[datetime] = None,
    ) -> "Lesson":
        now = datetime.now(timezone.utc)
        return cls(
            id=str(uuid4()),
            course_id=course_id,
            title=title,
            content=content or "",
            type=type,
            order=order,
            created_at=now,
            updated_at=now,
            video_url=video_url,
            pdf_url=pdf_url,
            drip_available_at=drip_available_at,
        )

    @property
    def is_archived(self) -> bool:
        return self.deleted_at is not None

    def is_available(self, now: Optional[datetime] = None) -> bool:
        if self.drip_available_at is None:
            return True
        return (now or datetime.now(timezone.utc)) >= self.drip_available_at

    def update(
        self,
        title: Optional[str] = None,
        content: Optional[str] = None,
        video_url: Optional[str] = None,
        pdf_url: Optional[str] = None,
    ) -> None:
        self._ensure_not_archived()
        if title is not None:
            self._validate_title(title)
            self.title = title
        if content is not None:
            self._validate_content(content, self.type)
            self.content = content
        if video_url is not None:
            self.video_url = video_url
        if pdf_url is not None:
            self.pdf_url = pdf_url
        self._validate_type_fields(self.type, self.video_url, self.pdf_url)
        self.updated_at = datetime.now(timezone.utc)

    def reorder(self, order: int) -> None:
        self._ensure_not_archived()
        self._validate_order(order)
        self.order = order
        self.updated_at = datetime.now(timezone.utc)

    def set_drip_date(self, available_at: datetime) -> None:
        self._ensure_not_archived()
        self.drip_available_at = available_at
        self.updated_at = datetime.now(timezone.utc)

    def clear_drip_date(self) -> None:
        self._ensure_not_archived()
        self.drip_available_at = None
        self.updated_at = datetime.now(timezone.utc)

    def archive(self) -> None:
        if self.is_archived:
            raise DomainValidationError("Lesson is already archived", field="archived")
        self.deleted_at = datetime.now(timezone.utc)
        self.updated_at = self.deleted_at

    def _ensure_not_archived(self) -> None:
        if self.is_archived:
            raise DomainValidationError("Cannot modify archived lesson", field="archived")

    @staticmethod
    def _validate_title(title: str) -> None:
        trimmed = (title or "").strip()
        if not trimmed:
            raise DomainValidationError("Lesson title is required", field="title")
        if len(trimmed) < 3:
            raise DomainValidationError(
                "Lesson title must be at least 3 characters", field="title_too_short"
            )
        if len(trimmed) > 200:
            raise DomainValidationError(
                "Lesson title must not exceed 200 characters", field="title_too_long"
            )

    @staticmethod
    def _validate_content(content: str, lesson_type: LessonType) -> None:
        if lesson_type == LessonType.TEXT and not (content or "").strip():
            raise DomainValidationError(
                "Lesson content is required for TEXT type", field="content"
            )

    @staticmethod
    def _validate_order(order: int) -> None:
        if isinstance(order, bool) or not isinstance(order, int) or order < 0:
            raise DomainValidationError(
                "Lesson order must be an integer greater than or equal to 0", field="order"
            )

    @staticmethod
    def _validate_type_fields(
        lesson_type: LessonType, video_url: Optional[str], pdf_url: Optional[str]
    ) -> None:
        if lesson_type == LessonType.VIDEO_EMBED:
            if not video_url or not video_url.strip():
                raise DomainValidationError(
                    "Video URL is required for VIDEO_EMBED type", field="video_url"
                )
            if not is_web_url(video_url):
                raise DomainValidationError("Video URL must be a valid URL", field="video_url")
        if lesson_type == LessonType.PDF:
            if not pdf_url or not pdf_url.strip():
                raise DomainValidationError("PDF URL is required for PDF type", field="pdf_url")
            if not is_web_url(pdf_url):
                raise DomainValidationError("PDF URL must be a valid URL", field="pdf_url")
