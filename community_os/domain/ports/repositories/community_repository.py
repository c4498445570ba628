"""
Community Repository Port - Interface for community persistence.
Implementations: infrastructure/persistence/{memory,prisma}/community_repository.py
"""

from abc import ABC, abstractmethod
from typing import Optional
from community_os.domain.entities.community import Community


class CommunityRepository(ABC):
    @abstractmethod
    async def create(self, community: Community) -> Community: ...

    @abstractmethod
    async def find_by_id(self, community_id: str) -> Optional[Community]: ...

    @abstractmethod
    async def find_all(self) -> list[Community]: ...

    @abstractmethod
    async def update(self, community: Community) -> Community: ...

    @abstractmethod
    async def delete(self, community_id: str) -> None:
        """Soft delete: stamps deleted_at."""
        ...
