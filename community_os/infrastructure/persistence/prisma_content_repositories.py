"""
Prisma repositories for posts, drafts, likes, comments and version history.

Likes are physically deleted (toggle semantics); posts and comments are
archived via deleted_at. Content versions are append-only.
"""

from typing import Any, Dict, Optional

from prisma import Prisma
from prisma.models import Comment as PrismaComment
from prisma.models import ContentVersion as PrismaContentVersion
from prisma.models import Like as PrismaLike
from prisma.models import Post as PrismaPost
from prisma.models import PostDraft as PrismaPostDraft

from community_os.domain.entities import (
    Comment,
    ContentType,
    ContentVersion,
    Like,
    Post,
    PostDraft,
)
from community_os.domain.ports.repositories import (
    CommentRepository,
    ContentVersionRepository,
    LikeRepository,
    PostDraftRepository,
    PostRepository,
)
from community_os.infrastructure.persistence.prisma_support import archived_now


class PrismaPostRepository(PostRepository):
    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        self._prisma = prisma

    def _to_entity(self, record: PrismaPost) -> Post:
        """Map Prisma record to domain entity."""
        return Post(
            id=record.id,
            community_id=record.community_id,
            author_id=record.author_id,
            title=record.title,
            content=record.content,
            created_at=record.created_at,
            updated_at=record.updated_at,
            published_at=record.published_at,
            is_pinned=record.is_pinned,
            is_solved=record.is_solved,
            like_count=record.like_count,
            helpful_count=record.helpful_count,
            comment_count=record.comment_count,
            view_count=record.view_count,
            payment_tier_id=record.payment_tier_id,
            deleted_at=record.deleted_at,
        )

    def _to_data(self, post: Post) -> Dict[str, Any]:
        return {
            "community_id": post.community_id,
            "author_id": post.author_id,
            "title": post.title,
            "content": post.content,
            "published_at": post.published_at,
            "is_pinned": post.is_pinned,
            "is_solved": post.is_solved,
            "like_count": post.like_count,
            "helpful_count": post.helpful_count,
            "comment_count": post.comment_count,
            "view_count": post.view_count,
            "payment_tier_id": post.payment_tier_id,
            "created_at": post.created_at,
            "updated_at": post.updated_at,
            "deleted_at": post.deleted_at,
        }

    async def create(self, post: Post) -> Post:
        record = await self._prisma.post.create(data={"id": post.id, **self._to_data(post)})
        return self._to_entity(record)

    async def find_by_id(self, post_id: str) -> Optional[Post]:
        record = await self._prisma.post.find_unique(where={"id": post_id})
        return self._to_entity(record) if record else None

    async def find_by_community_id(
        self, community_id: str, limit: int, offset: int
    ) -> list[Post]:
        records = await self._prisma.post.find_many(
            where={"community_id": community_id, "deleted_at": None},
            order=[{"is_pinned": "desc"}, {"created_at": "desc"}],
            skip=offset,
            take=limit,
        )
        return [self._to_entity(r) for r in records]

    async def update(self, post: Post) -> Post:
        record = await self._prisma.post.update(where={"id": post.id}, data=self._to_data(post))
        return self._to_entity(record) if record else post

    async def delete(self, post_id: str) -> None:
        await self._prisma.post.update_many(
            where={"id": post_id, "deleted_at": None},
            data=archived_now(),
        )


class PrismaPostDraftRepository(PostDraftRepository):
    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        self._prisma = prisma

    def _to_entity(self, record: PrismaPostDraft) -> PostDraft:
        return PostDraft(
            id=record.id,
            community_id=record.community_id,
            author_id=record.author_id,
            expires_at=record.expires_at,
            created_at=record.created_at,
            updated_at=record.updated_at,
            post_id=record.post_id,
            title=record.title,
            content=record.content,
        )

    def _to_data(self, draft: PostDraft) -> Dict[str, Any]:
        return {
            "community_id": draft.community_id,
            "author_id": draft.author_id,
            "post_id": draft.post_id,
            "title": draft.title,
            "content": draft.content,
            "expires_at": draft.expires_at,
            "created_at": draft.created_at,
            "updated_at": draft.updated_at,
        }

    async def find_by_author_and_post(
        self, author_id: str, post_id: Optional[str]
    ) -> Optional[PostDraft]:
        record = await self._prisma.postdraft.find_first(
            where={"author_id": author_id, "post_id": post_id},
            order={"updated_at": "desc"},
        )
        return self._to_entity(record) if record else None

    async def create(self, draft: PostDraft) -> PostDraft:
        record = await self._prisma.postdraft.create(
            data={"id": draft.id, **self._to_data(draft)}
        )
        return self._to_entity(record)

    async def update(self, draft: PostDraft) -> PostDraft:
        record = await self._prisma.postdraft.update(
            where={"id": draft.id},
            data=self._to_data(draft),
        )
        return self._to_entity(record) if record else draft


class PrismaLikeRepository(LikeRepository):
    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        self._prisma = prisma

    def _to_entity(self, record: PrismaLike) -> Like:
        return Like(
            id=record.id,
            user_id=record.user_id,
            created_at=record.created_at,
            post_id=record.post_id,
            comment_id=record.comment_id,
        )

    async def find_by_user_and_post(self, user_id: str, post_id: str) -> Optional[Like]:
        record = await self._prisma.like.find_first(
            where={"user_id": user_id, "post_id": post_id}
        )
        return self._to_entity(record) if record else None

    async def find_by_user_and_comment(
        self, user_id: str, comment_id: str
    ) -> Optional[Like]:
        record = await self._prisma.like.find_first(
            where={"user_id": user_id, "comment_id": comment_id}
        )
        return self._to_entity(record) if record else None

    async def create(self, like: Like) -> Like:
        record = await self._prisma.like.create(
            data={
                "id": like.id,
                "user_id": like.user_id,
                "post_id": like.post_id,
                "comment_id": like.comment_id,
                "created_at": like.created_at,
            }
        )
        return self._to_entity(record)

    async def delete(self, like_id: str) -> None:
        await self._prisma.like.delete_many(where={"id": like_id})


class PrismaCommentRepository(CommentRepository):
    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        self._prisma = prisma

    def _to_entity(self, record: PrismaComment) -> Comment:
        return Comment(
            id=record.id,
            post_id=record.post_id,
            author_id=record.author_id,
            content=record.content,
            created_at=record.created_at,
            updated_at=record.updated_at,
            parent_id=record.parent_id,
            like_count=record.like_count,
            helpful_count=record.helpful_count,
            deleted_at=record.deleted_at,
        )

    def _to_data(self, comment: Comment) -> Dict[str, Any]:
        return {
            "post_id": comment.post_id,
            "author_id": comment.author_id,
            "parent_id": comment.parent_id,
            "content": comment.content,
            "like_count": comment.like_count,
            "helpful_count": comment.helpful_count,
            "created_at": comment.created_at,
            "updated_at": comment.updated_at,
            "deleted_at": comment.deleted_at,
        }

    async def create(self, comment: Comment) -> Comment:
        record = await self._prisma.comment.create(
            data={"id": comment.id, **self._to_data(comment)}
        )
        return self._to_entity(record)

    async def find_by_id(self, comment_id: str) -> Optional[Comment]:
        record = await self._prisma.comment.find_unique(where={"id": comment_id})
        return self._to_entity(record) if record else None

    async def find_by_post_id(self, post_id: str) -> list[Comment]:
        records = await self._prisma.comment.find_many(
            where={"post_id": post_id, "deleted_at": None},
            order={"created_at": "asc"},
        )
        return [self._to_entity(r) for r in records]

    async def update(self, comment: Comment) -> Comment:
        record = await self._prisma.comment.update(
            where={"id": comment.id},
            data=self._to_data(comment),
        )
        return self._to_entity(record) if record else comment

    async def delete(self, comment_id: str) -> None:
        await self._prisma.comment.update_many(
            where={"id": comment_id, "deleted_at": None},
            data=archived_now(),
        )


class PrismaContentVersionRepository(ContentVersionRepository):
    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        self._prisma = prisma

    def _to_entity(self, record: PrismaContentVersion) -> ContentVersion:
        return ContentVersion(
            id=record.id,
            content_type=ContentType(record.content_type),
            content_id=record.content_id,
            content=record.content,
            version_number=record.version_number,
            created_at=record.created_at,
        )

    async def create(self, version: ContentVersion) -> ContentVersion:
        record = await self._prisma.contentversion.create(
            data={
                "id": version.id,
                "content_type": version.content_type.value,
                "content_id": version.content_id,
                "content": version.content,
                "version_number": version.version_number,
                "created_at": version.created_at,
            }
        )
        return self._to_entity(record)

    async def find_by_content_id(self, content_id: str) -> list[ContentVersion]:
        records = await self._prisma.contentversion.find_many(
            where={"content_id": content_id},
            order={"version_number": "desc"},
        )
        return [self._to_entity(r) for r in records]

    async def find_latest(self, content_id: str) -> Optional[ContentVersion]:
        record = await self._prisma.contentversion.find_first(
            where={"content_id": content_id},
            order={"version_number": "desc"},
        )
        return self._to_entity(record) if record else None

    async def find_by_number(
        self, content_id: str, version_number: int
    ) -> Optional[ContentVersion]:
        record = await self._prisma.contentversion.find_first(
            where={"content_id": content_id, "version_number": version_number}
        )
        return self._to_entity(record) if record else None
