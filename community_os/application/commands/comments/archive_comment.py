from dataclasses import dataclass

from community_os.application.common.errors import translate_errors
from community_os.application.common.interfaces import Command, CommandHandler
from community_os.application.dto import CommentDto
from community_os.application.errors import CommentError, CommentErrorCode
from community_os.application.mappers import to_comment_dto
from community_os.domain.ports.repositories import CommentRepository, PostRepository


@dataclass(frozen=True)
class ArchiveCommentCommand(Command[CommentDto]):
    comment_id: str


class ArchiveCommentHandler(CommandHandler[CommentDto]):
    def __init__(
        self,
        comment_repository: CommentRepository,
        post_repository: PostRepository,
    ):
        self._comment_repository = comment_repository
        self._post_repository = post_repository

    @translate_errors(CommentError)
    async def execute(self, command: ArchiveCommentCommand) -> CommentDto:
        if not command.comment_id or not command.comment_id.strip():
            raise CommentError(CommentErrorCode.INVALID_INPUT, "Comment ID is required")

        comment = await self._comment_repository.find_by_id(command.comment_id)
        if comment is None:
            raise CommentError(CommentErrorCode.COMMENT_NOT_FOUND)
        if comment.is_archived:
            raise CommentError(CommentErrorCode.COMMENT_ALREADY_ARCHIVED)

        comment.archive()
        await self._comment_repository.delete(comment.id)

        post = await self._post_repository.find_by_id(comment.post_id)
        if post is not None:
            post.decrement_comment_count()
            await self._post_repository.update(post)

        return to_comment_dto(comment)
