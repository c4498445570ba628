"""
Create Comment Command.

Threading is one level deep: a reply's parent must be a live root comment
on the same post. After the comment is stored the post counter is bumped
and REPLY / COMMENT_ON_POST / MENTION notifications go out; nobody is
notified about their own action and a user gets at most one of them.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from community_os.application.commands.notifications import (
    CreateNotificationCommand,
    CreateNotificationHandler,
    notify_safely,
)
from community_os.application.common.errors import translate_errors
from community_os.application.common.interfaces import Command, CommandHandler
from community_os.application.dto import CommentDto
from community_os.application.errors import CommentError, CommentErrorCode
from community_os.application.mappers import to_comment_dto
from community_os.domain.entities import Comment, NotificationType, Post, User
from community_os.domain.ports.repositories import (
    CommentRepository,
    ContentVersionRepository,
    PostRepository,
    UserRepository,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CreateCommentCommand(Command[CommentDto]):
    post_id: str
    author_id: str
    content: str
    parent_id: Optional[str] = None


class CreateCommentHandler(CommandHandler[CommentDto]):
    def __init__(
        self,
        comment_repository: CommentRepository,
        post_repository: PostRepository,
        user_repository: UserRepository,
        version_repository: ContentVersionRepository,
        create_notification: CreateNotificationHandler,
    ):
        self._comment_repository = comment_repository
        self._post_repository = post_repository
        self._user_repository = user_repository
        self._version_repository = version_repository
        self._create_notification = create_notification

    @translate_errors(CommentError)
    async def execute(self, command: CreateCommentCommand) -> CommentDto:
        if not command.post_id or not command.author_id:
            raise CommentError(CommentErrorCode.INVALID_INPUT, "Post ID and author ID are required")

        post = await self._post_repository.find_by_id(command.post_id)
        if post is None:
            raise CommentError(CommentErrorCode.POST_NOT_FOUND)
        if post.is_archived or not post.is_published:
            raise CommentError(CommentErrorCode.CANNOT_COMMENT_ON_ARCHIVED_POST)

        author = await self._user_repository.find_by_id(command.author_id)
        if author is None or author.is_archived:
            raise CommentError(CommentErrorCode.AUTHOR_NOT_FOUND)

        parent = None
        if command.parent_id:
            parent = await self._comment_repository.find_by_id(command.parent_id)
            if parent is None:
                raise CommentError(CommentErrorCode.PARENT_COMMENT_NOT_FOUND)
            if parent.post_id != post.id:
                raise CommentError(CommentErrorCode.PARENT_COMMENT_NOT_IN_POST)
            if parent.is_archived:
                raise CommentError(CommentErrorCode.CANNOT_REPLY_TO_ARCHIVED_COMMENT)
            if parent.is_reply:
                raise CommentError(
                    CommentErrorCode.MAX_NESTING_DEPTH_EXCEEDED,
                    "Replies can only be one level deep",
                )

        comment = Comment.create(
            post_id=post.id,
            author_id=author.id,
            content=command.content,
            parent_id=parent.id if parent else None,
        )
        created = await self._comment_repository.create(comment)
        await self._version_repository.create(created.create_version_snapshot(1))

        post.increment_comment_count()
        await self._post_repository.update(post)

        await self._send_notifications(created, post, author, parent)
        return to_comment_dto(created)

    async def _send_notifications(
        self, comment: Comment, post: Post, author: User, parent: Optional[Comment]
    ) -> None:
        link = f"/communities/{post.community_id}/posts/{post.id}#comment-{comment.id}"
        notified = {author.id}
        pending = []

        if parent is not None:
            pending.append(
                (parent.author_id, NotificationType.REPLY, f"{author.display_name} replied to your comment")
            )
        pending.append(
            (post.author_id, NotificationType.COMMENT_ON_POST, f"{author.display_name} commented on your post")
        )
        for user_id in comment.mentioned_user_ids():
            pending.append(
                (user_id, NotificationType.MENTION, f"{author.display_name} mentioned you in a comment")
            )

        for user_id, type_, message in pending:
            if user_id in notified:
                continue
            notified.add(user_id)
            await notify_safely(
                self._create_notification,
                CreateNotificationCommand(
                    user_id=user_id,
                    community_id=post.community_id,
                    type=type_.value,
                    message=message,
                    link_url=link,
                    actor_id=author.id,
                ),
            )
        logger.debug(f"[COMMENTS] {len(notified) - 1} notification(s) for comment {comment.id}")
