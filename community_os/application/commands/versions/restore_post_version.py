"""
Restore Post Version Command.

Writes an older snapshot back onto the post and records it as a new
version, so history is append-only.
"""

from dataclasses import dataclass

from community_os.application.common.errors import translate_errors
from community_os.application.common.interfaces import Command, CommandHandler
from community_os.application.dto import PostDto
from community_os.application.errors import ContentVersionError, ContentVersionErrorCode
from community_os.application.mappers import to_post_dto
from community_os.domain.ports.repositories import ContentVersionRepository, PostRepository


@dataclass(frozen=True)
class RestorePostVersionCommand(Command[PostDto]):
    post_id: str
    version_number: int


class RestorePostVersionHandler(CommandHandler[PostDto]):
    def __init__(
        self,
        post_repository: PostRepository,
        version_repository: ContentVersionRepository,
    ):
        self._post_repository = post_repository
        self._version_repository = version_repository

    @translate_errors(ContentVersionError)
    async def execute(self, command: RestorePostVersionCommand) -> PostDto:
        if not command.post_id or not command.post_id.strip():
            raise ContentVersionError(ContentVersionErrorCode.INVALID_INPUT, "Post ID is required")

        post = await self._post_repository.find_by_id(command.post_id)
        if post is None or post.is_archived:
            raise ContentVersionError(ContentVersionErrorCode.POST_NOT_FOUND)

        version = await self._version_repository.find_by_number(
            command.post_id, command.version_number
        )
        if version is None:
            raise ContentVersionError(ContentVersionErrorCode.VERSION_NOT_FOUND)

        latest = await self._version_repository.find_latest(command.post_id)
        if latest is not None and latest.version_number == version.version_number:
            raise ContentVersionError(ContentVersionErrorCode.CANNOT_RESTORE_CURRENT_VERSION)

        post.update(content=version.content)
        updated = await self._post_repository.update(post)
        await self._version_repository.create(
            updated.create_version_snapshot(latest.version_number + 1)
        )
        return to_post_dto(updated)
