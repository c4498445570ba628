from dataclasses import dataclass

from community_os.application.common.errors import translate_errors
from community_os.application.common.interfaces import Query, QueryHandler
from community_os.application.dto import CommentDto
from community_os.application.errors import CommentError, CommentErrorCode
from community_os.application.mappers import to_comment_dto
from community_os.domain.ports.repositories import CommentRepository


@dataclass(frozen=True)
class GetCommentQuery(Query[CommentDto]):
    comment_id: str


class GetCommentHandler(QueryHandler[CommentDto]):
    def __init__(self, comment_repository: CommentRepository):
        self._comment_repository = comment_repository

    @translate_errors(CommentError)
    async def execute(self, query: GetCommentQuery) -> CommentDto:
        if not query.comment_id or not query.comment_id.strip():
            raise CommentError(CommentErrorCode.INVALID_INPUT, "Comment ID is required")
        comment = await self._comment_repository.find_by_id(query.comment_id)
        if comment is None:
            raise CommentError(CommentErrorCode.COMMENT_NOT_FOUND)
        return to_comment_dto(comment)
