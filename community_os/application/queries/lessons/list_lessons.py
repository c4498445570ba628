from dataclasses import dataclass
from datetime import datetime, timezone

from community_os.application.common.errors import translate_errors
from community_os.application.common.interfaces import Query, QueryHandler
from community_os.application.dto import LessonDto
from community_os.application.errors import LessonError, LessonErrorCode
from community_os.application.mappers import to_lesson_dto
from community_os.domain.ports.repositories import LessonRepository


@dataclass(frozen=True)
class ListLessonsQuery(Query[list[LessonDto]]):
    course_id: str
    available_only: bool = False


class ListLessonsHandler(QueryHandler[list[LessonDto]]):
    def __init__(self, lesson_repository: LessonRepository):
        self._lesson_repository = lesson_repository

    @translate_errors(LessonError)
    async def execute(self, query: ListLessonsQuery) -> list[LessonDto]:
        if not query.course_id or not query.course_id.strip():
            raise LessonError(LessonErrorCode.INVALID_INPUT, "Course ID is required")

        now = datetime.now(timezone.utc)
        lessons = await self._lesson_repository.find_by_course_id(query.course_id)
        if query.available_only:
            lessons = [lesson for lesson in lessons if lesson.is_available(now)]
        return [to_lesson_dto(lesson, now) for lesson in lessons]
