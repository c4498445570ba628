"""
Post Draft Repository Port - Autosaved drafts, one per (author, post).
"""

from abc import ABC, abstractmethod
from typing import Optional
from community_os.domain.entities.post_draft import PostDraft


class PostDraftRepository(ABC):
    @abstractmethod
    async def find_by_author_and_post(
        self, author_id: str, post_id: Optional[str]
    ) -> Optional[PostDraft]: ...

    @abstractmethod
    async def create(self, draft: PostDraft) -> PostDraft: ...

    @abstractmethod
    async def update(self, draft: PostDraft) -> PostDraft: ...
