"""Memory repositories for courses, lessons, progress and certificates."""

from typing import Optional

from community_os.domain.entities import Certificate, Course, CourseProgress, Lesson
from community_os.domain.ports.repositories import (
    CertificateRepository,
    CourseProgressRepository,
    CourseRepository,
    LessonRepository,
)
from community_os.infrastructure.persistence.memory.store import (
    InMemoryStore,
    MemoryTable,
    live,
    soft_delete,
)


class MemoryCourseRepository(CourseRepository):
    def __init__(self, store: InMemoryStore):
        self._table: MemoryTable[Course] = MemoryTable(store.courses)

    async def create(self, course: Course) -> Course:
        return self._table.insert(course)

    async def find_by_id(self, course_id: str) -> Optional[Course]:
        return self._table.get(course_id)

    async def find_by_community_id(
        self, community_id: str, published_only: bool = False
    ) -> list[Course]:
        courses = self._table.where(
            lambda c: c.community_id == community_id
            and live(c)
            and (c.is_published or not published_only)
        )
        return sorted(courses, key=lambda c: c.created_at, reverse=True)

    async def update(self, course: Course) -> Course:
        return self._table.replace(course)

    async def delete(self, course_id: str) -> None:
        soft_delete(self._table, course_id)


class MemoryLessonRepository(LessonRepository):
    def __init__(self, store: InMemoryStore):
        self._table: MemoryTable[Lesson] = MemoryTable(store.lessons)

    async def create(self, lesson: Lesson) -> Lesson:
        return self._table.insert(lesson)

    async def find_by_id(self, lesson_id: str) -> Optional[Lesson]:
        return self._table.get(lesson_id)

    async def find_by_course_id(self, course_id: str) -> list[Lesson]:
        lessons = self._table.where(lambda l: l.course_id == course_id and live(l))
        return sorted(lessons, key=lambda l: (l.order, l.created_at))

    async def count_by_course_id(self, course_id: str) -> int:
        return self._table.count(lambda l: l.course_id == course_id and live(l))

    async def update(self, lesson: Lesson) -> Lesson:
        return self._table.replace(lesson)

    async def delete(self, lesson_id: str) -> None:
        soft_delete(self._table, lesson_id)


class MemoryCourseProgressRepository(CourseProgressRepository):
    def __init__(self, store: InMemoryStore):
        self._table: MemoryTable[CourseProgress] = MemoryTable(store.course_progress)

    async def create(self, progress: CourseProgress) -> CourseProgress:
        return self._table.insert(progress)

    async def find_by_id(self, progress_id: str) -> Optional[CourseProgress]:
        return self._table.get(progress_id)

    async def find_by_user_and_course(
        self, user_id: str, course_id: str
    ) -> Optional[CourseProgress]:
        return self._table.first(lambda p: p.user_id == user_id and p.course_id == course_id)

    async def count_by_course_id(self, course_id: str) -> int:
        return self._table.count(lambda p: p.course_id == course_id)

    async def update(self, progress: CourseProgress) -> CourseProgress:
        return self._table.replace(progress)


class MemoryCertificateRepository(CertificateRepository):
    def __init__(self, store: InMemoryStore):
        self._table: MemoryTable[Certificate] = MemoryTable(store.certificates)

    async def create(self, certificate: Certificate) -> Certificate:
        return self._table.insert(certificate)

    async def find_by_id(self, certificate_id: str) -> Optional[Certificate]:
        return self._table.get(certificate_id)

    async def find_by_verification_code(self, code: str) -> Optional[Certificate]:
        return self._table.first(lambda c: c.verification_code == code)

    async def find_by_user_id(self, user_id: str) -> list[Certificate]:
        certificates = self._table.where(lambda c: c.user_id == user_id)
        return sorted(certificates, key=lambda c: c.issued_at, reverse=True)

    async def find_by_user_and_course(
        self, user_id: str, course_id: str
    ) -> Optional[Certificate]:
        return self._table.first(lambda c: c.user_id == user_id and c.course_id == course_id)

    async def update(self, certificate: Certificate) -> Certificate:
        return self._table.replace(certificate)
