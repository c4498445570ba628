"""
Prisma Search Repository.

Case-insensitive `contains` matching on Postgres. Ranking is done by the
search handler; this layer only filters and caps each result set.
"""

from typing import Any, Dict, Optional

from prisma import Prisma

from community_os.domain.entities import Comment, Post, User
from community_os.domain.ports.repositories import SearchRepository
from community_os.infrastructure.persistence.prisma_community_repositories import (
    PrismaUserRepository,
)
from community_os.infrastructure.persistence.prisma_content_repositories import (
    PrismaCommentRepository,
    PrismaPostRepository,
)


def _contains(query: str) -> Dict[str, Any]:
    return {"contains": query, "mode": "insensitive"}


class PrismaSearchRepository(SearchRepository):
    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        self._prisma = prisma
        self._posts = PrismaPostRepository(prisma)
        self._comments = PrismaCommentRepository(prisma)
        self._users = PrismaUserRepository(prisma)

    def _visible_posts(self, community_id: Optional[str]) -> Dict[str, Any]:
        where: Dict[str, Any] = {"deleted_at": None, "published_at": {"not": None}}
        if community_id:
            where["community_id"] = community_id
        return where

    def _post_filter(self, query: str, community_id: Optional[str]) -> Dict[str, Any]:
        return {
            **self._visible_posts(community_id),
            "OR": [{"title": _contains(query)}, {"content": _contains(query)}],
        }

    def _user_filter(self, query: str, community_id: Optional[str]) -> Dict[str, Any]:
        where: Dict[str, Any] = {
            "deleted_at": None,
            "OR": [{"name": _contains(query)}, {"email": _contains(query)}],
        }
        if community_id:
            where["community_id"] = community_id
        return where

    async def search_posts(
        self, query: str, community_id: Optional[str], limit: int
    ) -> list[Post]:
        records = await self._prisma.post.find_many(
            where=self._post_filter(query, community_id),
            order={"created_at": "desc"},
            take=limit,
        )
        return [self._posts._to_entity(r) for r in records]

    async def search_comments(
        self, query: str, community_id: Optional[str], limit: int
    ) -> list[tuple[Comment, Post]]:
        comment_records = await self._prisma.comment.find_many(
            where={"deleted_at": None, "content": _contains(query)},
            order={"created_at": "desc"},
            take=limit * 2,
        )
        if not comment_records:
            return []

        post_ids = list({r.post_id for r in comment_records})
        post_records = await self._prisma.post.find_many(
            where={**self._visible_posts(community_id), "id": {"in": post_ids}}
        )
        posts = {r.id: self._posts._to_entity(r) for r in post_records}

        results = []
        for record in comment_records:
            post = posts.get(record.post_id)
            if post is None:
                continue
            results.append((self._comments._to_entity(record), post))
            if len(results) >= limit:
                break
        return results

    async def search_users(
        self, query: str, community_id: Optional[str], limit: int
    ) -> list[User]:
        records = await self._prisma.user.find_many(
            where=self._user_filter(query, community_id),
            order={"created_at": "asc"},
            take=limit,
        )
        return [self._users._to_entity(r) for r in records]

    async def count_posts(self, query: str, community_id: Optional[str]) -> int:
        return await self._prisma.post.count(where=self._post_filter(query, community_id))

    async def count_comments(self, query: str, community_id: Optional[str]) -> int:
        # No relation field on Comment, so visibility is resolved per matched post
        comment_records = await self._prisma.comment.find_many(
            where={"deleted_at": None, "content": _contains(query)}
        )
        if not comment_records:
            return 0
        post_ids = list({r.post_id for r in comment_records})
        visible = await self._prisma.post.find_many(
            where={**self._visible_posts(community_id), "id": {"in": post_ids}}
        )
        visible_ids = {r.id for r in visible}
        return sum(1 for r in comment_records if r.post_id in visible_ids)

    async def count_users(self, query: str, community_id: Optional[str]) -> int:
        return await self._prisma.user.count(where=self._user_filter(query, community_id))
