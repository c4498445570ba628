"""
Content Version Repository Port - Append-only content snapshots.
"""

from abc import ABC, abstractmethod
from typing import Optional
from community_os.domain.entities.content_version import ContentVersion


class ContentVersionRepository(ABC):
    @abstractmethod
    async def create(self, version: ContentVersion) -> ContentVersion: ...

    @abstractmethod
    async def find_by_content_id(self, content_id: str) -> list[ContentVersion]:
        """All versions of a piece of content, newest first."""
        ...

    @abstractmethod
    async def find_latest(self, content_id: str) -> Optional[ContentVersion]: ...

    @abstractmethod
    async def find_by_number(
        self, content_id: str, version_number: int
    ) -> Optional[ContentVersion]: ...
