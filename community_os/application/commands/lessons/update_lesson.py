from dataclasses import dataclass
from typing import Optional

from community_os.application.commands.lessons.instructor_guard import load_lesson_as_instructor
from community_os.application.common.errors import translate_errors
from community_os.application.common.interfaces import Command, CommandHandler
from community_os.application.dto import LessonDto
from community_os.application.errors import LessonError, LessonErrorCode
from community_os.application.mappers import to_lesson_dto
from community_os.domain.ports.repositories import CourseRepository, LessonRepository


@dataclass(frozen=True)
class UpdateLessonCommand(Command[LessonDto]):
    lesson_id: str
    requester_id: str
    title: Optional[str] = None
    content: Optional[str] = None
    video_url: Optional[str] = None
    pdf_url: Optional[str] = None


class UpdateLessonHandler(CommandHandler[LessonDto]):
    def __init__(
        self,
        lesson_repository: LessonRepository,
        course_repository: CourseRepository,
    ):
        self._lesson_repository = lesson_repository
        self._course_repository = course_repository

    @translate_errors(LessonError)
    async def execute(self, command: UpdateLessonCommand) -> LessonDto:
        if all(
            value is None
            for value in (command.title, command.content, command.video_url, command.pdf_url)
        ):
            raise LessonError(LessonErrorCode.INVALID_INPUT, "Nothing to update")

        lesson = await load_lesson_as_instructor(
            self._lesson_repository, self._course_repository, command.lesson_id, command.requester_id
        )
        lesson.update(
            title=command.title,
            content=command.content,
            video_url=command.video_url,
            pdf_url=command.pdf_url,
        )
        updated = await self._lesson_repository.update(lesson)
        return to_lesson_dto(updated)
