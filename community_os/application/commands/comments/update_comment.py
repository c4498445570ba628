from dataclasses import dataclass

from community_os.application.common.errors import translate_errors
from community_os.application.common.interfaces import Command, CommandHandler
from community_os.application.dto import CommentDto
from community_os.application.errors import CommentError, CommentErrorCode
from community_os.application.mappers import to_comment_dto
from community_os.domain.ports.repositories import CommentRepository, ContentVersionRepository


@dataclass(frozen=True)
class UpdateCommentCommand(Command[CommentDto]):
    comment_id: str
    content: str


class UpdateCommentHandler(CommandHandler[CommentDto]):
    def __init__(
        self,
        comment_repository: CommentRepository,
        version_repository: ContentVersionRepository,
    ):
        self._comment_repository = comment_repository
        self._version_repository = version_repository

    @translate_errors(CommentError)
    async def execute(self, command: UpdateCommentCommand) -> CommentDto:
        if not command.comment_id or not command.comment_id.strip():
            raise CommentError(CommentErrorCode.INVALID_INPUT, "Comment ID is required")

        comment = await self._comment_repository.find_by_id(command.comment_id)
        if comment is None:
            raise CommentError(CommentErrorCode.COMMENT_NOT_FOUND)
        if comment.is_archived:
            raise CommentError(CommentErrorCode.CANNOT_MODIFY_ARCHIVED_COMMENT)

        changed = command.content != comment.content
        comment.update_content(command.content)
        updated = await self._comment_repository.update(comment)

        if changed:
            latest = await self._version_repository.find_latest(updated.id)
            next_number = latest.version_number + 1 if latest else 1
            await self._version_repository.create(updated.create_version_snapshot(next_number))

        return to_comment_dto(updated)
