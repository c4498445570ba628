"""Prisma repositories for courses, lessons, progress and certificates."""

from typing import Any, Dict, Optional

from prisma import Prisma
from prisma.models import Certificate as PrismaCertificate
from prisma.models import Course as PrismaCourse
from prisma.models import CourseProgress as PrismaCourseProgress
from prisma.models import Lesson as PrismaLesson

from community_os.domain.entities import (
    Certificate,
    Course,
    CourseProgress,
    Lesson,
    LessonType,
)
from community_os.domain.ports.repositories import (
    CertificateRepository,
    CourseProgressRepository,
    CourseRepository,
    LessonRepository,
)
from community_os.infrastructure.persistence.prisma_support import archived_now


class PrismaCourseRepository(CourseRepository):
    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        self._prisma = prisma

    def _to_entity(self, record: PrismaCourse) -> Course:
        return Course(
            id=record.id,
            community_id=record.community_id,
            title=record.title,
            description=record.description,
            instructor_id=record.instructor_id,
            created_at=record.created_at,
            updated_at=record.updated_at,
            is_published=record.is_published,
            published_at=record.published_at,
            payment_tier_id=record.payment_tier_id,
            deleted_at=record.deleted_at,
        )

    def _to_data(self, course: Course) -> Dict[str, Any]:
        return {
            "community_id": course.community_id,
            "title": course.title,
            "description": course.description,
            "instructor_id": course.instructor_id,
            "is_published": course.is_published,
            "published_at": course.published_at,
            "payment_tier_id": course.payment_tier_id,
            "created_at": course.created_at,
            "updated_at": course.updated_at,
            "deleted_at": course.deleted_at,
        }

    async def create(self, course: Course) -> Course:
        record = await self._prisma.course.create(data={"id": course.id, **self._to_data(course)})
        return self._to_entity(record)

    async def find_by_id(self, course_id: str) -> Optional[Course]:
        record = await self._prisma.course.find_unique(where={"id": course_id})
        return self._to_entity(record) if record else None

    async def find_by_community_id(
        self, community_id: str, published_only: bool = False
    ) -> list[Course]:
        where: Dict[str, Any] = {"community_id": community_id, "deleted_at": None}
        if published_only:
            where["is_published"] = True
        records = await self._prisma.course.find_many(where=where, order={"created_at": "desc"})
        return [self._to_entity(r) for r in records]

    async def update(self, course: Course) -> Course:
        record = await self._prisma.course.update(
            where={"id": course.id},
            data=self._to_data(course),
        )
        return self._to_entity(record) if record else course

    async def delete(self, course_id: str) -> None:
        await self._prisma.course.update_many(
            where={"id": course_id, "deleted_at": None},
            data=archived_now(),
        )


class PrismaLessonRepository(LessonRepository):
    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        self._prisma = prisma

    def _to_entity(self, record: PrismaLesson) -> Lesson:
        return Lesson(
            id=record.id,
            course_id=record.course_id,
            title=record.title,
            content=record.content,
            type=LessonType(record.type),
            order=record.order,
            created_at=record.created_at,
            updated_at=record.updated_at,
            video_url=record.video_url,
            pdf_url=record.pdf_url,
            drip_available_at=record.drip_available_at,
            deleted_at=record.deleted_at,
        )

    def _to_data(self, lesson: Lesson) -> Dict[str, Any]:
        return {
            "course_id": lesson.course_id,
            "title": lesson.title,
            "content": lesson.content,
            "type": lesson.type.value,
            "order": lesson.order,
            "video_url": lesson.video_url,
            "pdf_url": lesson.pdf_url,
            "drip_available_at": lesson.drip_available_at,
            "created_at": lesson.created_at,
            "updated_at": lesson.updated_at,
            "deleted_at": lesson.deleted_at,
        }

    async def create(self, lesson: Lesson) -> Lesson:
        record = await self._prisma.lesson.create(data={"id": lesson.id, **self._to_data(lesson)})
        return self._to_entity(record)

    async def find_by_id(self, lesson_id: str) -> Optional[Lesson]:
        record = await self._prisma.lesson.find_unique(where={"id": lesson_id})
        return self._to_entity(record) if record else None

    async def find_by_course_id(self, course_id: str) -> list[Lesson]:
        records = await self._prisma.lesson.find_many(
            where={"course_id": course_id, "deleted_at": None},
            order=[{"order": "asc"}, {"created_at": "asc"}],
        )
        return [self._to_entity(r) for r in records]

    async def count_by_course_id(self, course_id: str) -> int:
        return await self._prisma.lesson.count(
            where={"course_id": course_id, "deleted_at": None}
        )

    async def update(self, lesson: Lesson) -> Lesson:
        record = await self._prisma.lesson.update(
            where={"id": lesson.id},
            data=self._to_data(lesson),
        )
        return self._to_entity(record) if record else lesson

    async def delete(self, lesson_id: str) -> None:
        await self._prisma.lesson.update_many(
            where={"id": lesson_id, "deleted_at": None},
            data=archived_now(),
        )


class PrismaCourseProgressRepository(CourseProgressRepository):
    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        self._prisma = prisma

    def _to_entity(self, record: PrismaCourseProgress) -> CourseProgress:
        return CourseProgress(
            id=record.id,
            course_id=record.course_id,
            user_id=record.user_id,
            created_at=record.created_at,
            updated_at=record.updated_at,
            completed_lesson_ids=list(record.completed_lesson_ids or []),
            last_accessed_lesson_id=record.last_accessed_lesson_id,
            completion_percentage=record.completion_percentage,
            completed_at=record.completed_at,
        )

    def _to_data(self, progress: CourseProgress) -> Dict[str, Any]:
        return {
            "course_id": progress.course_id,
            "user_id": progress.user_id,
            "completed_lesson_ids": list(progress.completed_lesson_ids),
            "last_accessed_lesson_id": progress.last_accessed_lesson_id,
            "completion_percentage": progress.completion_percentage,
            "completed_at": progress.completed_at,
            "created_at": progress.created_at,
            "updated_at": progress.updated_at,
        }

    async def create(self, progress: CourseProgress) -> CourseProgress:
        record = await self._prisma.courseprogress.create(
            data={"id": progress.id, **self._to_data(progress)}
        )
        return self._to_entity(record)

    async def find_by_id(self, progress_id: str) -> Optional[CourseProgress]:
        record = await self._prisma.courseprogress.find_unique(where={"id": progress_id})
        return self._to_entity(record) if record else None

    async def find_by_user_and_course(
        self, user_id: str, course_id: str
    ) -> Optional[CourseProgress]:
        record = await self._prisma.courseprogress.find_first(
            where={"user_id": user_id, "course_id": course_id}
        )
        return self._to_entity(record) if record else None

    async def count_by_course_id(self, course_id: str) -> int:
        return await self._prisma.courseprogress.count(where={"course_id": course_id})

    async def update(self, progress: CourseProgress) -> CourseProgress:
        record = await self._prisma.courseprogress.update(
            where={"id": progress.id},
            data=self._to_data(progress),
        )
        return self._to_entity(record) if record else progress


class PrismaCertificateRepository(CertificateRepository):
    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        self._prisma = prisma

    def _to_entity(self, record: PrismaCertificate) -> Certificate:
        return Certificate(
            id=record.id,
            course_id=record.course_id,
            user_id=record.user_id,
            user_name=record.user_name,
            course_name=record.course_name,
            instructor_name=record.instructor_name,
            issued_at=record.issued_at,
            verification_code=record.verification_code,
            pdf_url=record.pdf_url,
        )

    def _to_data(self, certificate: Certificate) -> Dict[str, Any]:
        return {
            "course_id": certificate.course_id,
            "user_id": certificate.user_id,
            "user_name": certificate.user_name,
            "course_name": certificate.course_name,
            "instructor_name": certificate.instructor_name,
            "verification_code": certificate.verification_code,
            "pdf_url": certificate.pdf_url,
            "issued_at": certificate.issued_at,
        }

    async def create(self, certificate: Certificate) -> Certificate:
        record = await self._prisma.certificate.create(
            data={"id": certificate.id, **self._to_data(certificate)}
        )
        return self._to_entity(record)

    async def find_by_id(self, certificate_id: str) -> Optional[Certificate]:
        record = await self._prisma.certificate.find_unique(where={"id": certificate_id})
        return self._to_entity(record) if record else None

    async def find_by_verification_code(self, code: str) -> Optional[Certificate]:
        record = await self._prisma.certificate.find_unique(where={"verification_code": code})
        return self._to_entity(record) if record else None

    async def find_by_user_id(self, user_id: str) -> list[Certificate]:
        records = await self._prisma.certificate.find_many(
            where={"user_id": user_id},
            order={"issued_at": "desc"},
        )
        return [self._to_entity(r) for r in records]

    async def find_by_user_and_course(
        self, user_id: str, course_id: str
    ) -> Optional[Certificate]:
        record = await self._prisma.certificate.find_first(
            where={"user_id": user_id, "course_id": course_id}
        )
        return self._to_entity(record) if record else None

    async def update(self, certificate: Certificate) -> Certificate:
        record = await self._prisma.certificate.update(
            where={"id": certificate.id},
            data=self._to_data(certificate),
        )
        return self._to_entity(record) if record else certificate
