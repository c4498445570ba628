from dataclasses import dataclass

from community_os.application.common.errors import translate_errors
from community_os.application.common.interfaces import Command, CommandHandler
from community_os.application.dto import PostDto
from community_os.application.errors import PostError, PostErrorCode
from community_os.application.mappers import to_post_dto
from community_os.domain.ports.repositories import PostRepository


@dataclass(frozen=True)
class PinPostCommand(Command[PostDto]):
    post_id: str
    is_pinned: bool


class PinPostHandler(CommandHandler[PostDto]):
    def __init__(self, post_repository: PostRepository):
        self._post_repository = post_repository

    @translate_errors(PostError)
    async def execute(self, command: PinPostCommand) -> PostDto:
        if not command.post_id or not command.post_id.strip():
            raise PostError(PostErrorCode.INVALID_INPUT, "Post ID is required")

        post = await self._post_repository.find_by_id(command.post_id)
        if post is None:
            raise PostError(PostErrorCode.POST_NOT_FOUND)
        if post.is_archived:
            raise PostError(PostErrorCode.CANNOT_MODIFY_ARCHIVED_POST)

        if command.is_pinned:
            post.pin()
        else:
            post.unpin()
        updated = await self._post_repository.update(post)
        return to_post_dto(updated)
