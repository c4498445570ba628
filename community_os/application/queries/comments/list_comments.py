"""
List Comments Query - a post's live comments as a one-level tree.
"""

from dataclasses import dataclass

from community_os.application.common.errors import translate_errors
from community_os.application.common.interfaces import Query, QueryHandler
from community_os.application.dto import CommentDto
from community_os.application.errors import CommentError, CommentErrorCode
from community_os.application.mappers import to_comment_dto
from community_os.domain.ports.repositories import CommentRepository, PostRepository


@dataclass(frozen=True)
class ListCommentsQuery(Query[list[CommentDto]]):
    post_id: str


class ListCommentsHandler(QueryHandler[list[CommentDto]]):
    def __init__(
        self,
        comment_repository: CommentRepository,
        post_repository: PostRepository,
    ):
        self._comment_repository = comment_repository
        self._post_repository = post_repository

    @translate_errors(CommentError)
    async def execute(self, query: ListCommentsQuery) -> list[CommentDto]:
        if not query.post_id or not query.post_id.strip():
            raise CommentError(CommentErrorCode.INVALID_INPUT, "Post ID is required")
        if await self._post_repository.find_by_id(query.post_id) is None:
            raise CommentError(CommentErrorCode.POST_NOT_FOUND)

        # repository returns oldest first; grouping keeps that order
        comments = await self._comment_repository.find_by_post_id(query.post_id)
        replies: dict[str, list[CommentDto]] = {}
        for comment in comments:
            if comment.parent_id:
                replies.setdefault(comment.parent_id, []).append(to_comment_dto(comment))

        return [
            to_comment_dto(comment, replies=replies.get(comment.id, []))
            for comment in comments
            if not comment.parent_id
        ]
