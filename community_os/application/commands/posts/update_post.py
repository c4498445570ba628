"""
Update Post Command.

A content change is snapshotted as the next ContentVersion.
"""

from dataclasses import dataclass
from typing import Optional

from community_os.application.common.errors import translate_errors
from community_os.application.common.interfaces import Command, CommandHandler
from community_os.application.dto import PostDto
from community_os.application.errors import PostError, PostErrorCode
from community_os.application.mappers import to_post_dto
from community_os.domain.ports.repositories import ContentVersionRepository, PostRepository


@dataclass(frozen=True)
class UpdatePostCommand(Command[PostDto]):
    post_id: str
    title: Optional[str] = None
    content: Optional[str] = None


class UpdatePostHandler(CommandHandler[PostDto]):
    def __init__(
        self,
        post_repository: PostRepository,
        version_repository: ContentVersionRepository,
    ):
        self._post_repository = post_repository
        self._version_repository = version_repository

    @translate_errors(PostError)
    async def execute(self, command: UpdatePostCommand) -> PostDto:
        if not command.post_id or not command.post_id.strip():
            raise PostError(PostErrorCode.INVALID_INPUT, "Post ID is required")
        if command.title is None and command.content is None:
            raise PostError(PostErrorCode.INVALID_INPUT, "Nothing to update")

        post = await self._post_repository.find_by_id(command.post_id)
        if post is None:
            raise PostError(PostErrorCode.POST_NOT_FOUND)
        if post.is_archived:
            raise PostError(PostErrorCode.CANNOT_MODIFY_ARCHIVED_POST)

        content_changed = command.content is not None and command.content != post.content
        post.update(title=command.title, content=command.content)
        updated = await self._post_repository.update(post)

        if content_changed:
            latest = await self._version_repository.find_latest(updated.id)
            next_number = latest.version_number + 1 if latest else 1
            await self._version_repository.create(updated.create_version_snapshot(next_number))

        return to_post_dto(updated)
