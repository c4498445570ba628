"""
User Repository Port - Interface for community member persistence.

Member pages sort on one of MEMBER_SORT_COLUMNS; ties keep join order.
"""

from abc import ABC, abstractmethod
from typing import Optional
from community_os.domain.entities.user import User

MEMBER_SORT_COLUMNS = ("name", "created_at", "updated_at")


class UserRepository(ABC):
    @abstractmethod
    async def create(self, user: User) -> User: ...

    @abstractmethod
    async def find_by_id(self, user_id: str) -> Optional[User]: ...

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]: ...

    @abstractmethod
    async def find_by_community_id(self, community_id: str) -> list[User]: ...

    @abstractmethod
    async def find_page(
        self,
        community_id: str,
        sort_column: str,
        descending: bool,
        offset: int,
        limit: int,
    ) -> list[User]:
        """Non-archived members of a community, one page at a time."""
        ...

    @abstractmethod
    async def count_by_community_id(self, community_id: str) -> int: ...

    @abstractmethod
    async def find_by_name_prefix(
        self, community_id: str, prefix: str, limit: int
    ) -> list[User]:
        """Members with any word of their name starting with prefix (case-insensitive), by name."""
        ...

    @abstractmethod
    async def update(self, user: User) -> User: ...

    @abstractmethod
    async def delete(self, user_id: str) -> None: ...
