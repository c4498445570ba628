"""Memory repositories for forum content."""

from typing import Optional

from community_os.domain.entities import Comment, ContentVersion, Like, Post, PostDraft
from community_os.domain.ports.repositories import (
    CommentRepository,
    ContentVersionRepository,
    LikeRepository,
    PostDraftRepository,
    PostRepository,
)
from community_os.infrastructure.persistence.memory.store import (
    InMemoryStore,
    MemoryTable,
    live,
    soft_delete,
)


class MemoryPostRepository(PostRepository):
    def __init__(self, store: InMemoryStore):
        self._table: MemoryTable[Post] = MemoryTable(store.posts)

    async def create(self, post: Post) -> Post:
        return self._table.insert(post)

    async def find_by_id(self, post_id: str) -> Optional[Post]:
        return self._table.get(post_id)

    async def find_by_community_id(
        self, community_id: str, limit: int, offset: int
    ) -> list[Post]:
        posts = self._table.where(lambda p: p.community_id == community_id and live(p))
        posts.sort(key=lambda p: p.created_at, reverse=True)
        posts.sort(key=lambda p: p.is_pinned, reverse=True)
        return posts[offset : offset + limit]

    async def update(self, post: Post) -> Post:
        return self._table.replace(post)

    async def delete(self, post_id: str) -> None:
        soft_delete(self._table, post_id)


class MemoryPostDraftRepository(PostDraftRepository):
    def __init__(self, store: InMemoryStore):
        self._table: MemoryTable[PostDraft] = MemoryTable(store.post_drafts)

    async def find_by_author_and_post(
        self, author_id: str, post_id: Optional[str]
    ) -> Optional[PostDraft]:
        return self._table.first(lambda d: d.author_id == author_id and d.post_id == post_id)

    async def create(self, draft: PostDraft) -> PostDraft:
        return self._table.insert(draft)

    async def update(self, draft: PostDraft) -> PostDraft:
        return self._table.replace(draft)


class MemoryLikeRepository(LikeRepository):
    def __init__(self, store: InMemoryStore):
        self._table: MemoryTable[Like] = MemoryTable(store.likes)

    async def find_by_user_and_post(self, user_id: str, post_id: str) -> Optional[Like]:
        return self._table.first(lambda l: l.user_id == user_id and l.post_id == post_id)

    async def find_by_user_and_comment(self, user_id: str, comment_id: str) -> Optional[Like]:
        return self._table.first(lambda l: l.user_id == user_id and l.comment_id == comment_id)

    async def create(self, like: Like) -> Like:
        return self._table.insert(like)

    async def delete(self, like_id: str) -> None:
        self._table.remove(like_id)


class MemoryCommentRepository(CommentRepository):
    def __init__(self, store: InMemoryStore):
        self._table: MemoryTable[Comment] = MemoryTable(store.comments)

    async def create(self, comment: Comment) -> Comment:
        return self._table.insert(comment)

    async def find_by_id(self, comment_id: str) -> Optional[Comment]:
        return self._table.get(comment_id)

    async def find_by_post_id(self, post_id: str) -> list[Comment]:
        comments = self._table.where(lambda c: c.post_id == post_id and live(c))
        return sorted(comments, key=lambda c: c.created_at)

    async def update(self, comment: Comment) -> Comment:
        return self._table.replace(comment)

    async def delete(self, comment_id: str) -> None:
        soft_delete(self._table, comment_id)


class MemoryContentVersionRepository(ContentVersionRepository):
    def __init__(self, store: InMemoryStore):
        self._table: MemoryTable[ContentVersion] = MemoryTable(store.content_versions)

    async def create(self, version: ContentVersion) -> ContentVersion:
        return self._table.insert(version)

    async def find_by_content_id(self, content_id: str) -> list[ContentVersion]:
        versions = self._table.where(lambda v: v.content_id == content_id)
        return sorted(versions, key=lambda v: v.version_number, reverse=True)

    async def find_latest(self, content_id: str) -> Optional[ContentVersion]:
        versions = await self.find_by_content_id(content_id)
        return versions[0] if versions else None

    async def find_by_number(
        self, content_id: str, version_number: int
    ) -> Optional[ContentVersion]:
        return self._table.first(
            lambda v: v.content_id == content_id and v.version_number == version_number
        )
