from dataclasses import dataclass

from community_os.application.common.errors import translate_errors
from community_os.application.common.interfaces import Query, QueryHandler
from community_os.application.dto import CourseDto
from community_os.application.errors import CourseError, CourseErrorCode
from community_os.application.queries.courses.course_details import course_details
from community_os.domain.ports.repositories import (
    CourseProgressRepository,
    CourseRepository,
    LessonRepository,
    UserRepository,
)


@dataclass(frozen=True)
class ListCoursesQuery(Query[list[CourseDto]]):
    community_id: str
    published_only: bool = False


class ListCoursesHandler(QueryHandler[list[CourseDto]]):
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
    async def execute(self, query: ListCoursesQuery) -> list[CourseDto]:
        if not query.community_id or not query.community_id.strip():
            raise CourseError(CourseErrorCode.INVALID_INPUT, "Community ID is required")
        courses = await self._course_repository.find_by_community_id(
            query.community_id, published_only=query.published_only
        )
        return [
            await course_details(
                course, self._user_repository, self._lesson_repository, self._progress_repository
            )
            for course in courses
        ]
