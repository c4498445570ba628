from dataclasses import dataclass

from community_os.application.common.errors import translate_errors
from community_os.application.common.interfaces import Command, CommandHandler
from community_os.application.dto import ProgressDto
from community_os.application.errors import ProgressError, ProgressErrorCode
from community_os.application.mappers import to_progress_dto
from community_os.domain.ports.repositories import CourseProgressRepository, LessonRepository


@dataclass(frozen=True)
class MarkCompleteCommand(Command[ProgressDto]):
    progress_id: str
    lesson_id: str


class MarkCompleteHandler(CommandHandler[ProgressDto]):
    """Marks one lesson complete on an existing progress record."""

    def __init__(
        self,
        progress_repository: CourseProgressRepository,
        lesson_repository: LessonRepository,
    ):
        self._progress_repository = progress_repository
        self._lesson_repository = lesson_repository

    @translate_errors(ProgressError)
    async def execute(self, command: MarkCompleteCommand) -> ProgressDto:
        if not command.progress_id or not command.lesson_id:
            raise ProgressError(
                ProgressErrorCode.INVALID_INPUT, "Progress ID and lesson ID are required"
            )

        progress = await self._progress_repository.find_by_id(command.progress_id)
        if progress is None:
            raise ProgressError(ProgressErrorCode.PROGRESS_NOT_FOUND)

        lessons = await self._lesson_repository.find_by_course_id(progress.course_id)
        lesson_ids = [lesson.id for lesson in lessons]
        if command.lesson_id not in lesson_ids:
            raise ProgressError(
                ProgressErrorCode.INVALID_LESSON_ID, "Lesson does not belong to this course"
            )

        progress.mark_lesson_complete(command.lesson_id)
        progress.update_last_accessed(command.lesson_id)
        progress.recalculate(lesson_ids)
        updated = await self._progress_repository.update(progress)
        return to_progress_dto(updated)
