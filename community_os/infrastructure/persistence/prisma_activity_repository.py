"""
Prisma Activity Repository.

Comments and likes carry no community column, so they are scoped through
the ids of the community's live posts. Per-user tallies are counted in
Python over the matching rows.
"""

from collections import Counter
from datetime import datetime
from typing import Any, Dict, Optional

from prisma import Prisma

from community_os.domain.ports.repositories import ActivityRepository
from community_os.domain.value_objects import Role


def _since(column: str, since: Optional[datetime]) -> Dict[str, Any]:
    return {column: {"gte": since}} if since else {}


class PrismaActivityRepository(ActivityRepository):
    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        self._prisma = prisma

    async def _community_post_ids(self, community_id: str) -> list[str]:
        records = await self._prisma.post.find_many(
            where={"community_id": community_id, "deleted_at": None}
        )
        return [r.id for r in records]

    async def _community_comments(
        self, community_id: str, since: Optional[datetime] = None
    ) -> list:
        post_ids = await self._community_post_ids(community_id)
        if not post_ids:
            return []
        return await self._prisma.comment.find_many(
            where={"post_id": {"in": post_ids}, "deleted_at": None, **_since("created_at", since)}
        )

    async def count_members(
        self,
        community_id: str,
        role: Optional[Role] = None,
        seen_since: Optional[datetime] = None,
    ) -> int:
        where: Dict[str, Any] = {"community_id": community_id, "deleted_at": None}
        if role is not None:
            where["role"] = role.value
        where.update(_since("last_seen_at", seen_since))
        return await self._prisma.user.count(where=where)

    async def count_published_posts(self, community_id: str) -> int:
        return await self._prisma.post.count(
            where={
                "community_id": community_id,
                "deleted_at": None,
                "published_at": {"not": None},
            }
        )

    async def count_comments(self, community_id: str) -> int:
        post_ids = await self._community_post_ids(community_id)
        if not post_ids:
            return 0
        return await self._prisma.comment.count(
            where={"post_id": {"in": post_ids}, "deleted_at": None}
        )

    async def posts_by_author(
        self, community_id: str, since: Optional[datetime] = None
    ) -> dict[str, int]:
        published: Dict[str, Any] = {"not": None}
        if since:
            published["gte"] = since
        records = await self._prisma.post.find_many(
            where={
                "community_id": community_id,
                "deleted_at": None,
                "published_at": published,
            }
        )
        return dict(Counter(r.author_id for r in records))

    async def comments_by_author(
        self, community_id: str, since: Optional[datetime] = None
    ) -> dict[str, int]:
        records = await self._community_comments(community_id, since)
        return dict(Counter(r.author_id for r in records))

    async def likes_by_user(
        self, community_id: str, since: Optional[datetime] = None
    ) -> dict[str, int]:
        post_ids = await self._community_post_ids(community_id)
        if not post_ids:
            return {}
        comment_ids = [r.id for r in await self._community_comments(community_id)]
        targets: list[Dict[str, Any]] = [{"post_id": {"in": post_ids}}]
        if comment_ids:
            targets.append({"comment_id": {"in": comment_ids}})
        records = await self._prisma.like.find_many(
            where={"OR": targets, **_since("created_at", since)}
        )
        return dict(Counter(r.user_id for r in records))
