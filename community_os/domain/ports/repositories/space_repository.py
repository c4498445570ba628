"""
Space Repository Port - Interface for space persistence.
"""

from abc import ABC, abstractmethod
from typing import Optional
from community_os.domain.entities.space import Space


class SpaceRepository(ABC):
    @abstractmethod
    async def create(self, space: Space) -> Space: ...

    @abstractmethod
    async def find_by_id(self, space_id: str) -> Optional[Space]: ...

    @abstractmethod
    async def find_root_spaces(self, community_id: str) -> list[Space]:
        """Non-archived spaces without a parent, ordered by position."""
        ...

    @abstractmethod
    async def find_children(self, parent_space_id: str) -> list[Space]: ...

    @abstractmethod
    async def update(self, space: Space) -> Space: ...

    @abstractmethod
    async def delete(self, space_id: str) -> None: ...
