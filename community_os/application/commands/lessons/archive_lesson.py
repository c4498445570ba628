from dataclasses import dataclass

from community_os.application.commands.lessons.instructor_guard import load_course_as_instructor
from community_os.application.common.errors import translate_errors
from community_os.application.common.interfaces import Command, CommandHandler
from community_os.application.dto import LessonDto
from community_os.application.errors import LessonError, LessonErrorCode
from community_os.application.mappers import to_lesson_dto
from community_os.domain.ports.repositories import CourseRepository, LessonRepository


@dataclass(frozen=True)
class ArchiveLessonCommand(Command[LessonDto]):
    lesson_id: str
    requester_id: str


class ArchiveLessonHandler(CommandHandler[LessonDto]):
    def __init__(
        self,
        lesson_repository: LessonRepository,
        course_repository: CourseRepository,
    ):
        self._lesson_repository = lesson_repository
        self._course_repository = course_repository

    @translate_errors(LessonError)
    async def execute(self, command: ArchiveLessonCommand) -> LessonDto:
        if not command.lesson_id or not command.lesson_id.strip():
            raise LessonError(LessonErrorCode.INVALID_INPUT, "Lesson ID is required")

        lesson = await self._lesson_repository.find_by_id(command.lesson_id)
        if lesson is None:
            raise LessonError(LessonErrorCode.LESSON_NOT_FOUND)
        await load_course_as_instructor(
            self._course_repository, lesson.course_id, command.requester_id
        )
        if lesson.is_archived:
            raise LessonError(LessonErrorCode.LESSON_ALREADY_ARCHIVED)

        lesson.archive()
        await self._lesson_repository.delete(lesson.id)
        return to_lesson_dto(lesson)
