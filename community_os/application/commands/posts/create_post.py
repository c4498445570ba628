"""
Create Post Command.

Posts start as drafts (published_at is None). Version 1 of the content is
snapshotted, and every user mentioned in the body gets a MENTION notification.
"""

from dataclasses import dataclass

from community_os.application.commands.notifications import (
    CreateNotificationCommand,
    CreateNotificationHandler,
    notify_safely,
)
from community_os.application.common.errors import translate_errors
from community_os.application.common.interfaces import Command, CommandHandler
from community_os.application.dto import PostDto
from community_os.application.errors import PostError, PostErrorCode
from community_os.application.mappers import to_post_dto
from community_os.domain.entities import NotificationType, Post
from community_os.domain.ports.repositories import (
    CommunityRepository,
    ContentVersionRepository,
    PostRepository,
    UserRepository,
)


@dataclass(frozen=True)
class CreatePostCommand(Command[PostDto]):
    community_id: str
    author_id: str
    title: str
    content: str


class CreatePostHandler(CommandHandler[PostDto]):
    def __init__(
        self,
        post_repository: PostRepository,
        community_repository: CommunityRepository,
        user_repository: UserRepository,
        version_repository: ContentVersionRepository,
        create_notification: CreateNotificationHandler,
    ):
        self._post_repository = post_repository
        self._community_repository = community_repository
        self._user_repository = user_repository
        self._version_repository = version_repository
        self._create_notification = create_notification

    @translate_errors(PostError)
    async def execute(self, command: CreatePostCommand) -> PostDto:
        if not command.community_id or not command.author_id:
            raise PostError(PostErrorCode.INVALID_INPUT, "Community ID and author ID are required")

        community = await self._community_repository.find_by_id(command.community_id)
        if community is None or community.is_archived:
            raise PostError(PostErrorCode.COMMUNITY_NOT_FOUND)
        author = await self._user_repository.find_by_id(command.author_id)
        if author is None or author.is_archived:
            raise PostError(PostErrorCode.AUTHOR_NOT_FOUND)

        post = Post.create(
            community_id=command.community_id,
            author_id=command.author_id,
            title=command.title,
            content=command.content,
        )
        created = await self._post_repository.create(post)
        await self._version_repository.create(created.create_version_snapshot(1))

        for user_id in created.mentioned_user_ids():
            if user_id == created.author_id:
                continue
            await notify_safely(
                self._create_notification,
                CreateNotificationCommand(
                    user_id=user_id,
                    community_id=created.community_id,
                    type=NotificationType.MENTION.value,
                    message=f"{author.display_name} mentioned you in a post",
                    link_url=f"/communities/{created.community_id}/posts/{created.id}",
                    actor_id=created.author_id,
                ),
            )

        return to_post_dto(created)
