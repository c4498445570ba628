from dataclasses import dataclass

from community_os.application.commands.lessons.instructor_guard import load_lesson_as_instructor
from community_os.application.common.errors import translate_errors
from community_os.application.common.interfaces import Command, CommandHandler
from community_os.application.dto import LessonDto
from community_os.application.errors import LessonError
from community_os.application.mappers import to_lesson_dto
from community_os.domain.ports.repositories import CourseRepository, LessonRepository


@dataclass(frozen=True)
class ReorderLessonCommand(Command[LessonDto]):
    lesson_id: str
    requester_id: str
    order: int


class ReorderLessonHandler(CommandHandler[LessonDto]):
    def __init__(
        self,
        lesson_repository: LessonRepository,
        course_repository: CourseRepository,
    ):
        self._lesson_repository = lesson_repository
        self._course_repository = course_repository

    @translate_errors(LessonError)
    async def execute(self, command: ReorderLessonCommand) -> LessonDto:
        lesson = await load_lesson_as_instructor(
            self._lesson_repository, self._course_repository, command.lesson_id, command.requester_id
        )
        lesson.reorder(command.order)
        updated = await self._lesson_repository.update(lesson)
        return to_lesson_dto(updated)
