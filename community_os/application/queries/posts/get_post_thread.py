"""
Get Post Thread Query - A post with its comment tree, as the post page renders it.

Counts as a view of published posts. Comment authors are resolved once per
author id; archived or missing authors show as "Unknown".
"""

from dataclasses import dataclass
from typing import Optional

from community_os.application.common.errors import translate_errors
from community_os.application.common.interfaces import Query, QueryHandler
from community_os.application.dto import CommentDto, PostThreadDto
from community_os.application.errors import PostError, PostErrorCode
from community_os.application.mappers import to_comment_dto, to_post_dto
from community_os.domain.entities import User
from community_os.domain.ports.repositories import (
    CommentRepository,
    LikeRepository,
    PostRepository,
    UserRepository,
)


@dataclass(frozen=True)
class GetPostThreadQuery(Query[PostThreadDto]):
    post_id: str
    viewer_id: Optional[str] = None


class GetPostThreadHandler(QueryHandler[PostThreadDto]):
    def __init__(
        self,
        post_repository: PostRepository,
        comment_repository: CommentRepository,
        user_repository: UserRepository,
        like_repository: LikeRepository,
    ):
        self._post_repository = post_repository
        self._comment_repository = comment_repository
        self._user_repository = user_repository
        self._like_repository = like_repository

    @translate_errors(PostError)
    async def execute(self, query: GetPostThreadQuery) -> PostThreadDto:
        if not query.post_id or not query.post_id.strip():
            raise PostError(PostErrorCode.INVALID_INPUT, "Post ID is required")
        post = await self._post_repository.find_by_id(query.post_id)
        if post is None or post.is_archived:
            raise PostError(PostErrorCode.POST_NOT_FOUND)

        if post.is_published:
            post.increment_view_count()
            post = await self._post_repository.update(post)

        comments = await self._comment_repository.find_by_post_id(post.id)
        bylines: dict[str, tuple[str, Optional[str]]] = {}
        for author_id in {post.author_id, *(c.author_id for c in comments)}:
            bylines[author_id] = _byline(await self._user_repository.find_by_id(author_id))

        replies: dict[str, list[CommentDto]] = {}
        for comment in comments:
            if comment.parent_id:
                name, avatar = bylines[comment.author_id]
                replies.setdefault(comment.parent_id, []).append(
                    to_comment_dto(comment, author_name=name, author_avatar=avatar)
                )
        tree = [
            to_comment_dto(
                comment,
                replies=replies.get(comment.id, []),
                author_name=bylines[comment.author_id][0],
                author_avatar=bylines[comment.author_id][1],
            )
            for comment in comments
            if not comment.parent_id
        ]

        user_has_liked = False
        if query.viewer_id:
            like = await self._like_repository.find_by_user_and_post(query.viewer_id, post.id)
            user_has_liked = like is not None

        author_name, author_avatar = bylines[post.author_id]
        return PostThreadDto(
            post=to_post_dto(post),
            author_name=author_name,
            author_avatar=author_avatar,
            comments=tree,
            user_has_liked=user_has_liked,
        )


def _byline(user: Optional[User]) -> tuple[str, Optional[str]]:
    if user is None or user.is_archived:
        return "Unknown", None
    return user.display_name, user.avatar_url
