from datetime import datetime
from typing import Optional

from community_os.application.dto import (
    CertificateDto,
    CourseDto,
    LessonDto,
    ProgressDto,
)
from community_os.application.mappers.common import to_iso
from community_os.domain.entities import Certificate, Course, CourseProgress, Lesson


def to_course_dto(
    course: Course, instructor_name: str, lesson_count: int, enrolled_count: int
) -> CourseDto:
    return CourseDto(
        id=course.id,
        community_id=course.community_id,
        title=course.title,
        description=course.description,
        instructor_id=course.instructor_id,
        instructor_name=instructor_name,
        is_published=course.is_published,
        published_at=to_iso(course.published_at),
        payment_tier_id=course.payment_tier_id,
        lesson_count=lesson_count,
        enrolled_count=enrolled_count,
        created_at=to_iso(course.created_at),
        updated_at=to_iso(course.updated_at),
    )


def to_lesson_dto(lesson: Lesson, now: Optional[datetime] = None) -> LessonDto:
    return LessonDto(
        id=lesson.id,
        course_id=lesson.course_id,
        title=lesson.title,
        content=lesson.content,
        type=lesson.type.value,
        video_url=lesson.video_url,
        pdf_url=lesson.pdf_url,
        order=lesson.order,
        drip_available_at=to_iso(lesson.drip_available_at),
        is_available=lesson.is_available(now),
        created_at=to_iso(lesson.created_at),
        updated_at=to_iso(lesson.updated_at),
    )


def to_progress_dto(progress: CourseProgress) -> ProgressDto:
    return ProgressDto(
        id=progress.id,
        course_id=progress.course_id,
        user_id=progress.user_id,
        completed_lesson_ids=list(progress.completed_lesson_ids),
        last_accessed_lesson_id=progress.last_accessed_lesson_id,
        completion_percentage=progress.completion_percentage,
        completed_at=to_iso(progress.completed_at),
        created_at=to_iso(progress.created_at),
        updated_at=to_iso(progress.updated_at),
    )


def to_certificate_dto(certificate: Certificate) -> CertificateDto:
    return CertificateDto(
        id=certificate.id,
        course_id=certificate.course_id,
        user_id=certificate.user_id,
        user_name=certificate.user_name,
        course_name=certificate.course_name,
        instructor_name=certificate.instructor_name,
        issued_at=to_iso(certificate.issued_at),
        pdf_url=certificate.pdf_url,
        verification_code=certificate.verification_code,
    )
