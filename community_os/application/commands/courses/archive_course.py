from dataclasses import dataclass

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
class ArchiveCourseCommand(Command[CourseDto]):
    course_id: str
    requester_id: str


class ArchiveCourseHandler(CommandHandler[CourseDto]):
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
    async def execute(self, command: ArchiveCourseCommand) -> CourseDto:
        course = await load_course_for_instructor(
            self._course_repository, command.course_id, command.requester_id
        )
        if course.is_archived:
            raise CourseError(CourseErrorCode.COURSE_ALREADY_ARCHIVED)
        if course.is_published:
            raise CourseError(CourseErrorCode.CANNOT_ARCHIVE_PUBLISHED_COURSE)

        course.archive()
        await self._course_repository.delete(course.id)
        return await course_details(
            course, self._user_repository, self._lesson_repository, self._progress_repository
        )
