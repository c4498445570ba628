"""
Activity Repository Port - Aggregate counts behind community stats and the leaderboard.

Only non-archived rows count. A post counts once it is published; comments
and likes count when they belong to a non-archived post of the community
(or to a comment on one). since=None means all time.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from community_os.domain.value_objects import Role


class ActivityRepository(ABC):
    @abstractmethod
    async def count_members(
        self,
        community_id: str,
        role: Optional[Role] = None,
        seen_since: Optional[datetime] = None,
    ) -> int: ...

    @abstractmethod
    async def count_published_posts(self, community_id: str) -> int: ...

    @abstractmethod
    async def count_comments(self, community_id: str) -> int: ...

    @abstractmethod
    async def posts_by_author(
        self, community_id: str, since: Optional[datetime] = None
    ) -> dict[str, int]:
        """Published posts per author id, filtered on published_at."""
        ...

    @abstractmethod
    async def comments_by_author(
        self, community_id: str, since: Optional[datetime] = None
    ) -> dict[str, int]: ...

    @abstractmethod
    async def likes_by_user(
        self, community_id: str, since: Optional[datetime] = None
    ) -> dict[str, int]:
        """Likes given per user id, on posts and on comments."""
        ...
