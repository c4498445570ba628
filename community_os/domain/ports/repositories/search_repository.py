"""
Search Repository Port - Case-insensitive substring lookups used by search.

community_id=None searches every community. Each count_* method counts
every row its search_* sibling would match, ignoring the limit.
"""

from abc import ABC, abstractmethod
from typing import Optional
from community_os.domain.entities.comment import Comment
from community_os.domain.entities.post import Post
from community_os.domain.entities.user import User


class SearchRepository(ABC):
    @abstractmethod
    async def search_posts(
        self, query: str, community_id: Optional[str], limit: int
    ) -> list[Post]:
        """Published, non-archived posts whose title or content matches."""
        ...

    @abstractmethod
    async def search_comments(
        self, query: str, community_id: Optional[str], limit: int
    ) -> list[tuple[Comment, Post]]:
        """Non-archived comments on published posts, paired with their post."""
        ...

    @abstractmethod
    async def search_users(
        self, query: str, community_id: Optional[str], limit: int
    ) -> list[User]: ...

    @abstractmethod
    async def count_posts(self, query: str, community_id: Optional[str]) -> int: ...

    @abstractmethod
    async def count_comments(self, query: str, community_id: Optional[str]) -> int: ...

    @abstractmethod
    async def count_users(self, query: str, community_id: Optional[str]) -> int: ...
