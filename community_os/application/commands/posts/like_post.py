"""
Like Post Command - toggles the user's like on a post.
"""

from dataclasses import dataclass

from community_os.application.common.errors import translate_errors
from community_os.application.common.interfaces import Command, CommandHandler
from community_os.application.dto import LikeResultDto
from community_os.application.errors import PostError, PostErrorCode
from community_os.domain.entities import Like
from community_os.domain.ports.repositories import (
    LikeRepository,
    PostRepository,
    UserRepository,
)


@dataclass(frozen=True)
class LikePostCommand(Command[LikeResultDto]):
    post_id: str
    user_id: str


class LikePostHandler(CommandHandler[LikeResultDto]):
    def __init__(
        self,
        like_repository: LikeRepository,
        post_repository: PostRepository,
        user_repository: UserRepository,
    ):
        self._like_repository = like_repository
        self._post_repository = post_repository
        self._user_repository = user_repository

    @translate_errors(PostError)
    async def execute(self, command: LikePostCommand) -> LikeResultDto:
        if not command.user_id or not command.user_id.strip():
            raise PostError(PostErrorCode.USER_NOT_FOUND)
        if not command.post_id or not command.post_id.strip():
            raise PostError(PostErrorCode.POST_NOT_FOUND)

        if await self._user_repository.find_by_id(command.user_id) is None:
            raise PostError(PostErrorCode.USER_NOT_FOUND)
        post = await self._post_repository.find_by_id(command.post_id)
        if post is None or post.is_archived:
            raise PostError(PostErrorCode.POST_NOT_FOUND)

        existing = await self._like_repository.find_by_user_and_post(
            command.user_id, command.post_id
        )
        if existing:
            await self._like_repository.delete(existing.id)
            post.decrement_like_count()
        else:
            await self._like_repository.create(Like.for_post(command.user_id, command.post_id))
            post.increment_like_count()

        updated = await self._post_repository.update(post)
        return LikeResultDto(is_liked=existing is None, like_count=updated.like_count)
