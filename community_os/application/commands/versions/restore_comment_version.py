from dataclasses import dataclass

from community_os.application.common.errors import translate_errors
from community_os.application.common.interfaces import Command, CommandHandler
from community_os.application.dto import CommentDto
from community_os.application.errors import ContentVersionError, ContentVersionErrorCode
from community_os.application.mappers import to_comment_dto
from community_os.domain.entities import ContentType
from community_os.domain.ports.repositories import CommentRepository, ContentVersionRepository


@dataclass(frozen=True)
class RestoreCommentVersionCommand(Command[CommentDto]):
    comment_id: str
    version_number: int


class RestoreCommentVersionHandler(CommandHandler[CommentDto]):
    """Same append-only rule as posts: the restored text becomes the newest version."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        version_repository: ContentVersionRepository,
    ):
        self._comment_repository = comment_repository
        self._version_repository = version_repository

    @translate_errors(ContentVersionError)
    async def execute(self, command: RestoreCommentVersionCommand) -> CommentDto:
        if not command.comment_id or not command.comment_id.strip():
            raise ContentVersionError(
                ContentVersionErrorCode.INVALID_INPUT, "Comment ID is required"
            )

        comment = await self._comment_repository.find_by_id(command.comment_id)
        if comment is None or comment.is_archived:
            raise ContentVersionError(ContentVersionErrorCode.COMMENT_NOT_FOUND)

        version = await self._version_repository.find_by_number(
            command.comment_id, command.version_number
        )
        if version is None or version.content_type != ContentType.COMMENT:
            raise ContentVersionError(ContentVersionErrorCode.VERSION_NOT_FOUND)

        latest = await self._version_repository.find_latest(command.comment_id)
        if latest is not None and latest.version_number == version.version_number:
            raise ContentVersionError(ContentVersionErrorCode.CANNOT_RESTORE_CURRENT_VERSION)

        comment.update_content(version.content)
        updated = await self._comment_repository.update(comment)
        await self._version_repository.create(
            updated.create_version_snapshot(latest.version_number + 1)
        )
        return to_comment_dto(updated)
