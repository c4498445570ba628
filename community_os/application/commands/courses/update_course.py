from dataclasses import dataclass
from typing import Optional

from community_os.application.commands.courses.instructor_guard import load_course_for_instructor
from community_os.application.common.errors import translate_errors
from community_os.application.common.interfaces import Command, CommandHandler
from community_os.application.dto import CourseDto
from community_os.application.errors import CourseError, CourseErrorCode
from community_os.application.queries.courses import course_details
from community_os.domain.ports.repositories import (
    CourseProgressRepository,
    CourseRepository,
    LessonRepository,
    UserRepository,
)


@dataclass(frozen=True)
class UpdateCourseCommand(Command[CourseDto]):
    course_id: str
    requester_id: str
    title: Optional[str] = None
    description: Optional[str] = None


class UpdateCourseHandler(CommandHandler[CourseDto]):
    def __init__(
        self,
        course_repository: CourseRepository,
        user_repository: UserRepository,
        lesson_repository: LessonRepository,
        progress_repository: CourseProgressRepository,
    ):
        self._course_repository = course_repository
        self._user_repository = user_repository
        self._lesson_repository = lesson_repository
        self._progress_repository = progress_repository

    @translate_errors(CourseError)
    async def execute(self, command: UpdateCourseCommand) -> CourseDto:
        if command.title is None and command.description is None:
            raise CourseError(CourseErrorCode.INVALID_INPUT, "Nothing to update")
        course = await load_course_for_instructor(
            self._course_repository, command.course_id, command.requester_id
        )
        if course.is_archived:
            raise CourseError(CourseErrorCode.CANNOT_MODIFY_ARCHIVED_COURSE)

        course.update(title=command.title, description=command.description)
        updated = await self._course_repository.update(course)
        return await course_details(
            updated, self._user_repository, self._lesson_repository, self._progress_repository
        )
