"""
Channel Repository Port - Interface for channel persistence.
"""

from abc import ABC, abstractmethod
from typing import Optional
from community_os.domain.entities.channel import Channel


class ChannelRepository(ABC):
    @abstractmethod
    async def create(self, channel: Channel) -> Channel: ...

    @abstractmethod
    async def find_by_id(self, channel_id: str) -> Optional[Channel]: ...

    @abstractmethod
    async def find_by_space_id(self, space_id: str) -> list[Channel]: ...

    @abstractmethod
    async def find_standalone(self, community_id: str) -> list[Channel]:
        """Non-archived channels that live outside any space."""
        ...

    @abstractmethod
    async def update(self, channel: Channel) -> Channel: ...

    @abstractmethod
    async def delete(self, channel_id: str) -> None: ...
