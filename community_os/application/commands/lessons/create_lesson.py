"""
Create Lesson Command.

Without an explicit order the lesson is appended after the course's
existing lessons.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from community_os.application.commands.lessons.instructor_guard import load_course_as_instructor
from community_os.application.common.errors import translate_errors
from community_os.application.common.interfaces import Command, CommandHandler
from community_os.application.dto import LessonDto
from community_os.application.errors import LessonError, LessonErrorCode
from community_os.application.mappers import to_lesson_dto
from community_os.domain.entities import Lesson
from community_os.domain.ports.repositories import CourseRepository, LessonRepository


@dataclass(frozen=True)
class CreateLessonCommand(Command[LessonDto]):
    course_id: str
    requester_id: str
    title: str
    content: str
    type: str
    video_url: Optional[str] = None
    pdf_url: Optional[str] = None
    order: Optional[int] = None
    drip_available_at: Optional[datetime] = None


class CreateLessonHandler(CommandHandler[LessonDto]):
    def __init__(
        self,
        lesson_repository: LessonRepository,
        course_repository: CourseRepository,
    ):
        self._lesson_repository = lesson_repository
        self._course_repository = course_repository

    @translate_errors(LessonError)
    async def execute(self, command: CreateLessonCommand) -> LessonDto:
        course = await load_course_as_instructor(
            self._course_repository, command.course_id, command.requester_id
        )
        if course.is_archived:
            raise LessonError(LessonErrorCode.COURSE_NOT_FOUND)
        drip_available_at = command.drip_available_at
        if drip_available_at is not None and drip_available_at.tzinfo is None:
            drip_available_at = drip_available_at.replace(tzinfo=timezone.utc)
        if drip_available_at and drip_available_at < datetime.now(timezone.utc):
            raise LessonError(LessonErrorCode.DRIP_DATE_IN_PAST)

        order = command.order
        if order is None:
            order = await self._lesson_repository.count_by_course_id(course.id)

        lesson = Lesson.create(
            course_id=course.id,
            title=command.title,
            content=command.content,
            type=command.type,
            order=order,
            video_url=command.video_url,
            pdf_url=command.pdf_url,
            drip_available_at=drip_available_at,
        )
        created = await self._lesson_repository.create(lesson)
        return to_lesson_dto(created)
