"""Course, lesson, progress and certificate DTOs. Timestamps are ISO-8601 strings."""

from typing import Optional

from community_os.application.dto.base import CamelModel


class CourseDto(CamelModel):
    id: str
    community_id: str
    title: str
    description: str
    instructor_id: str
    instructor_name: str
    is_published: bool
    published_at: Optional[str] = None
    payment_tier_id: Optional[str] = None
    lesson_count: int
    enrolled_count: int
    created_at: str
    updated_at: str


class LessonDto(CamelModel):
    id: str
    course_id: str
    title: str
    content: str
    type: str
    video_url: Optional[str] = None
    pdf_url: Optional[str] = None
    order: int
    drip_available_at: Optional[str] = None
    is_available: bool
    created_at: str
    updated_at: str


class ProgressDto(CamelModel):
    id: str
    course_id: str
    user_id: str
    completed_lesson_ids: list[str]
    last_accessed_lesson_id: Optional[str] = None
    completion_percentage: int
    completed_at: Optional[str] = None
    created_at: str
    updated_at: str


class CertificateDto(CamelModel):
    id: str
    course_id: str
    user_id: str
    user_name: str
    course_name: str
    instructor_name: str
    issued_at: str
    pdf_url: Optional[str] = None
    verification_code: str


class CertificateVerificationDto(CamelModel):
    is_valid: bool
    certificate: Optional[CertificateDto] = None
