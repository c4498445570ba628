from dataclasses import dataclass
from typing import Optional

from community_os.application.common.errors import translate_errors
from community_os.application.common.interfaces import Query, QueryHandler
from community_os.application.dto import ProgressDto
from community_os.application.errors import ProgressError, ProgressErrorCode
from community_os.application.mappers import to_progress_dto
from community_os.domain.ports.repositories import CourseProgressRepository


@dataclass(frozen=True)
class GetProgressQuery(Query[Optional[ProgressDto]]):
    user_id: str
    course_id: str


class GetProgressHandler(QueryHandler[Optional[ProgressDto]]):
    """A user who never started the course has no progress: returns None."""

    def __init__(self, progress_repository: CourseProgressRepository):
        self._progress_repository = progress_repository

    @translate_errors(ProgressError)
    async def execute(self, query: GetProgressQuery) -> Optional[ProgressDto]:
        if not query.user_id or not query.course_id:
            raise ProgressError(
                ProgressErrorCode.INVALID_INPUT, "User ID and course ID are required"
            )
        progress = await self._progress_repository.find_by_user_and_course(
            query.user_id, query.course_id
        )
        if progress is None:
            return None
        return to_progress_dto(progress)
