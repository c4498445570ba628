from collections import Counter
from datetime import datetime
from typing import Optional

from community_os.domain.entities import Comment, Like, Post, User
from community_os.domain.ports.repositories import ActivityRepository
from community_os.domain.value_objects import Role
from community_os.infrastructure.persistence.memory.store import (
    InMemoryStore,
    MemoryTable,
    live,
)


def _on_or_after(value: Optional[datetime], since: Optional[datetime]) -> bool:
    return since is None or (value is not None and value >= since)


class MemoryActivityRepository(ActivityRepository):
    def __init__(self, store: InMemoryStore):
        self._users: MemoryTable[User] = MemoryTable(store.users)
        self._posts: MemoryTable[Post] = MemoryTable(store.posts)
        self._comments: MemoryTable[Comment] = MemoryTable(store.comments)
        self._likes: MemoryTable[Like] = MemoryTable(store.likes)

    def _community_post_ids(self, community_id: str) -> set[str]:
        return {
            p.id for p in self._posts.rows() if p.community_id == community_id and live(p)
        }

    def _community_comments(self, community_id: str) -> list[Comment]:
        post_ids = self._community_post_ids(community_id)
        return [c for c in self._comments.rows() if live(c) and c.post_id in post_ids]

    async def count_members(
        self,
        community_id: str,
        role: Optional[Role] = None,
        seen_since: Optional[datetime] = None,
    ) -> int:
        return self._users.count(
            lambda u: u.community_id == community_id
            and live(u)
            and (role is None or u.role == role)
            and (seen_since is None or _on_or_after(u.last_seen_at, seen_since))
        )

    async def count_published_posts(self, community_id: str) -> int:
        return self._posts.count(
            lambda p: p.community_id == community_id and live(p) and p.is_published
        )

    async def count_comments(self, community_id: str) -> int:
        return len(self._community_comments(community_id))

    async def posts_by_author(
        self, community_id: str, since: Optional[datetime] = None
    ) -> dict[str, int]:
        return dict(
            Counter(
                p.author_id
                for p in self._posts.rows()
                if p.community_id == community_id
                and live(p)
                and p.is_published
                and _on_or_after(p.published_at, since)
            )
        )

    async def comments_by_author(
        self, community_id: str, since: Optional[datetime] = None
    ) -> dict[str, int]:
        return dict(
            Counter(
                c.author_id
                for c in self._community_comments(community_id)
                if _on_or_after(c.created_at, since)
            )
        )

    async def likes_by_user(
        self, community_id: str, since: Optional[datetime] = None
    ) -> dict[str, int]:
        post_ids = self._community_post_ids(community_id)
        comment_ids = {c.id for c in self._community_comments(community_id)}
        return dict(
            Counter(
                like.user_id
                for like in self._likes.rows()
                if (like.post_id in post_ids or like.comment_id in comment_ids)
                and _on_or_after(like.created_at, since)
            )
        )
