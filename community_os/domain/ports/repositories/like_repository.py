"""
Like Repository Port - Likes are toggled, so delete is physical here.
"""

from abc import ABC, abstractmethod
from typing import Optional
from community_os.domain.entities.like import Like


class LikeRepository(ABC):
    @abstractmethod
    async def find_by_user_and_post(self, user_id: str, post_id: str) -> Optional[Like]: ...

    @abstractmethod
    async def find_by_user_and_comment(
        self, user_id: str, comment_id: str
    ) -> Optional[Like]: ...

    @abstractmethod
    async def create(self, like: Like) -> Like: ...

    @abstractmethod
    async def delete(self, like_id: str) -> None: ...
