from dataclasses import dataclass

from community_os.application.common.errors import translate_errors
from community_os.application.common.interfaces import Query, QueryHandler
from community_os.application.dto import LessonDto
from community_os.application.errors import LessonError, LessonErrorCode
from community_os.application.mappers import to_lesson_dto
from community_os.domain.ports.repositories import LessonRepository


@dataclass(frozen=True)
class GetLessonQuery(Query[LessonDto]):
    lesson_id: str


class GetLessonHandler(QueryHandler[LessonDto]):
    def __init__(self, lesson_repository: LessonRepository):
        self._lesson_repository = lesson_repository

    @translate_errors(LessonError)
    async def execute(self, query: GetLessonQuery) -> LessonDto:
        if not query.lesson_id or not query.lesson_id.strip():
            raise LessonError(LessonErrorCode.INVALID_INPUT, "Lesson ID is required")
        lesson = await self._lesson_repository.find_by_id(query.lesson_id)
        if lesson is None:
            raise LessonError(LessonErrorCode.LESSON_NOT_FOUND)
        return to_lesson_dto(lesson)
