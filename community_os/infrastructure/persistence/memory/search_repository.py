from typing import Optional

from community_os.domain.entities import Comment, Post, User
from community_os.domain.ports.repositories import SearchRepository
from community_os.domain.services import strip_html
from community_os.infrastructure.persistence.memory.store import (
    InMemoryStore,
    MemoryTable,
    live,
)


class MemorySearchRepository(SearchRepository):
    """Linear scans over the store; matching mirrors the Prisma `contains` + insensitive mode."""

    def __init__(self, store: InMemoryStore):
        self._posts: MemoryTable[Post] = MemoryTable(store.posts)
        self._comments: MemoryTable[Comment] = MemoryTable(store.comments)
        self._users: MemoryTable[User] = MemoryTable(store.users)

    def _visible_post(self, post: Post, community_id: Optional[str]) -> bool:
        return (
            live(post)
            and post.is_published
            and (community_id is None or post.community_id == community_id)
        )

    def _matching_posts(self, query: str, community_id: Optional[str]) -> list[Post]:
        needle = query.lower()
        posts = self._posts.where(lambda p: self._visible_post(p, community_id))
        title_hits = [p for p in posts if needle in p.title.lower()]
        content_hits = [
            p for p in posts
            if needle not in p.title.lower() and needle in strip_html(p.content).lower()
        ]
        title_hits.sort(key=lambda p: p.created_at, reverse=True)
        content_hits.sort(key=lambda p: p.created_at, reverse=True)
        return title_hits + content_hits

    def _matching_comments(
        self, query: str, community_id: Optional[str]
    ) -> list[tuple[Comment, Post]]:
        needle = query.lower()
        comments = self._comments.where(
            lambda c: live(c) and needle in strip_html(c.content).lower()
        )
        comments.sort(key=lambda c: c.created_at, reverse=True)
        results = []
        for comment in comments:
            post = self._posts.get(comment.post_id)
            if post is not None and self._visible_post(post, community_id):
                results.append((comment, post))
        return results

    def _matching_users(self, query: str, community_id: Optional[str]) -> list[User]:
        needle = query.lower()
        users = self._users.where(
            lambda u: live(u)
            and (community_id is None or u.community_id == community_id)
            and (needle in (u.name or "").lower() or needle in u.email.value.lower())
        )
        users.sort(key=lambda u: u.created_at)
        return users

    async def search_posts(
        self, query: str, community_id: Optional[str], limit: int
    ) -> list[Post]:
        return self._matching_posts(query, community_id)[:limit]

    async def search_comments(
        self, query: str, community_id: Optional[str], limit: int
    ) -> list[tuple[Comment, Post]]:
        return self._matching_comments(query, community_id)[:limit]

    async def search_users(
        self, query: str, community_id: Optional[str], limit: int
    ) -> list[User]:
        return self._matching_users(query, community_id)[:limit]

    async def count_posts(self, query: str, community_id: Optional[str]) -> int:
        return len(self._matching_posts(query, community_id))

    async def count_comments(self, query: str, community_id: Optional[str]) -> int:
        return len(self._matching_comments(query, community_id))

    async def count_users(self, query: str, community_id: Optional[str]) -> int:
        return len(self._matching_users(query, community_id))
