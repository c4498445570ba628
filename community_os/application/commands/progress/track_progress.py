"""
Track Progress Command.

Marks a lesson complete for a learner, creating the progress record on the
first lesson. Finishing the last lesson completes the course and issues the
certificate; certificate problems are logged and never fail the request.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone

from community_os.application.commands.certificates import (
    GenerateCertificateCommand,
    GenerateCertificateHandler,
)
from community_os.application.common.errors import translate_errors
from community_os.application.common.interfaces import Command, CommandHandler
from community_os.application.dto import ProgressDto
from community_os.application.errors import CertificateError, ProgressError, ProgressErrorCode
from community_os.application.mappers import to_progress_dto
from community_os.domain.entities import CourseProgress
from community_os.domain.ports.repositories import (
    CourseProgressRepository,
    CourseRepository,
    LessonRepository,
    UserRepository,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TrackProgressCommand(Command[ProgressDto]):
    user_id: str
    course_id: str
    lesson_id: str


class TrackProgressHandler(CommandHandler[ProgressDto]):
    def __init__(
        self,
        progress_repository: CourseProgressRepository,
        course_repository: CourseRepository,
        lesson_repository: LessonRepository,
        user_repository: UserRepository,
        generate_certificate: GenerateCertificateHandler,
    ):
        self._progress_repository = progress_repository
        self._course_repository = course_repository
        self._lesson_repository = lesson_repository
        self._user_repository = user_repository
        self._generate_certificate = generate_certificate

    @translate_errors(ProgressError)
    async def execute(self, command: TrackProgressCommand) -> ProgressDto:
        if not command.user_id or not command.course_id or not command.lesson_id:
            raise ProgressError(
                ProgressErrorCode.INVALID_INPUT, "User ID, course ID and lesson ID are required"
            )

        course = await self._course_repository.find_by_id(command.course_id)
        if course is None:
            raise ProgressError(ProgressErrorCode.COURSE_NOT_FOUND)
        if await self._user_repository.find_by_id(command.user_id) is None:
            raise ProgressError(ProgressErrorCode.USER_NOT_FOUND)

        lessons = await self._lesson_repository.find_by_course_id(course.id)
        lesson = next((item for item in lessons if item.id == command.lesson_id), None)
        if lesson is None:
            raise ProgressError(
                ProgressErrorCode.INVALID_LESSON_ID, "Lesson does not belong to this course"
            )
        if not lesson.is_available(datetime.now(timezone.utc)):
            raise ProgressError(ProgressErrorCode.LESSON_NOT_AVAILABLE)

        progress = await self._progress_repository.find_by_user_and_course(
            command.user_id, command.course_id
        )
        is_new = progress is None
        if is_new:
            progress = CourseProgress.create(course_id=course.id, user_id=command.user_id)

        progress.mark_lesson_complete(lesson.id)
        progress.update_last_accessed(lesson.id)
        lesson_ids = [item.id for item in lessons]
        progress.recalculate(lesson_ids)

        finished = not progress.is_complete and set(lesson_ids) <= set(progress.completed_lesson_ids)
        if finished:
            progress.mark_course_complete()

        if is_new:
            saved = await self._progress_repository.create(progress)
        else:
            saved = await self._progress_repository.update(progress)

        if finished:
            await self._issue_certificate(command.user_id, course.id)
        return to_progress_dto(saved)

    async def _issue_certificate(self, user_id: str, course_id: str) -> None:
        try:
            await self._generate_certificate.execute(
                GenerateCertificateCommand(user_id=user_id, course_id=course_id)
            )
        except CertificateError as exc:
            logger.warning(
                f"[PROGRESS] Certificate for user {user_id} course {course_id} not issued: "
                f"{exc.code.value}"
            )
