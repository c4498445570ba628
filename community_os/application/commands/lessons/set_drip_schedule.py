"""
Set Drip Schedule Command - lock a lesson until a future date, or unlock it
(available_at=None).
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from community_os.application.commands.lessons.instructor_guard import load_lesson_as_instructor
from community_os.application.common.errors import translate_errors
from community_os.application.common.interfaces import Command, CommandHandler
from community_os.application.dto import LessonDto
from community_os.application.errors import LessonError, LessonErrorCode
from community_os.application.mappers import to_lesson_dto
from community_os.domain.ports.repositories import CourseRepository, LessonRepository


@dataclass(frozen=True)
class SetDripScheduleCommand(Command[LessonDto]):
    lesson_id: str
    requester_id: str
    available_at: Optional[datetime] = None


class SetDripScheduleHandler(CommandHandler[LessonDto]):
    def __init__(
        self,
        lesson_repository: LessonRepository,
        course_repository: CourseRepository,
    ):
        self._lesson_repository = lesson_repository
        self._course_repository = course_repository

    @translate_errors(LessonError)
    async def execute(self, command: SetDripScheduleCommand) -> LessonDto:
        lesson = await load_lesson_as_instructor(
            self._lesson_repository, self._course_repository, command.lesson_id, command.requester_id
        )

        if command.available_at is None:
            lesson.clear_drip_date()
        else:
            available_at = command.available_at
            if available_at.tzinfo is None:
                available_at = available_at.replace(tzinfo=timezone.utc)
            if available_at < datetime.now(timezone.utc):
                raise LessonError(
                    LessonErrorCode.DRIP_DATE_IN_PAST, "Drip date must be in the future"
                )
            lesson.set_drip_date(available_at)

        updated = await self._lesson_repository.update(lesson)
        return to_lesson_dto(updated)
