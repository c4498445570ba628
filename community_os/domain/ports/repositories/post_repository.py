"""
Post Repository Port - Interface for forum post persistence.
"""

from abc import ABC, abstractmethod
from typing import Optional
from community_os.domain.entities.post import Post


class PostRepository(ABC):
    @abstractmethod
    async def create(self, post: Post) -> Post: ...

    @abstractmethod
    async def find_by_id(self, post_id: str) -> Optional[Post]: ...

    @abstractmethod
    async def find_by_community_id(
        self, community_id: str, limit: int, offset: int
    ) -> list[Post]:
        """Non-archived posts, pinned first, then newest first."""
        ...

    @abstractmethod
    async def update(self, post: Post) -> Post: ...

    @abstractmethod
    async def delete(self, post_id: str) -> None: ...
