"""
Comment Repository Port - Interface for comment persistence.
"""

from abc import ABC, abstractmethod
from typing import Optional
from community_os.domain.entities.comment import Comment


class CommentRepository(ABC):
    @abstractmethod
    async def create(self, comment: Comment) -> Comment: ...

    @abstractmethod
    async def find_by_id(self, comment_id: str) -> Optional[Comment]: ...

    @abstractmethod
    async def find_by_post_id(self, post_id: str) -> list[Comment]:
        """Non-archived comments of a post, oldest first."""
        ...

    @abstractmethod
    async def update(self, comment: Comment) -> Comment: ...

    @abstractmethod
    async def delete(self, comment_id: str) -> None: ...
