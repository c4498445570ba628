from dataclasses import dataclass

from community_os.application.common.errors import translate_errors
from community_os.application.common.interfaces import Command, CommandHandler
from community_os.application.dto import LikeResultDto
from community_os.application.errors import CommentError, CommentErrorCode
from community_os.domain.entities import Like
from community_os.domain.ports.repositories import (
    CommentRepository,
    LikeRepository,
    UserRepository,
)


@dataclass(frozen=True)
class LikeCommentCommand(Command[LikeResultDto]):
    comment_id: str
    user_id: str


class LikeCommentHandler(CommandHandler[LikeResultDto]):
    """Toggle: a second like from the same user removes the first."""

    def __init__(
        self,
        like_repository: LikeRepository,
        comment_repository: CommentRepository,
        user_repository: UserRepository,
    ):
        self._like_repository = like_repository
        self._comment_repository = comment_repository
        self._user_repository = user_repository

    @translate_errors(CommentError)
    async def execute(self, command: LikeCommentCommand) -> LikeResultDto:
        if not command.comment_id or not command.user_id:
            raise CommentError(CommentErrorCode.INVALID_INPUT, "Comment ID and user ID are required")

        if await self._user_repository.find_by_id(command.user_id) is None:
            raise CommentError(CommentErrorCode.AUTHOR_NOT_FOUND, "User not found")
        comment = await self._comment_repository.find_by_id(command.comment_id)
        if comment is None or comment.is_archived:
            raise CommentError(CommentErrorCode.COMMENT_NOT_FOUND)

        existing = await self._like_repository.find_by_user_and_comment(
            command.user_id, command.comment_id
        )
        if existing:
            await self._like_repository.delete(existing.id)
            comment.decrement_like_count()
        else:
            await self._like_repository.create(
                Like.for_comment(command.user_id, command.comment_id)
            )
            comment.increment_like_count()

        updated = await self._comment_repository.update(comment)
        return LikeResultDto(is_liked=existing is None, like_count=updated.like_count)
