"""Comment DTOs."""

from datetime import datetime
from typing import Optional

from community_os.application.dto.base import CamelModel


class CommentDto(CamelModel):
    id: str
    post_id: str
    author_id: str
    parent_id: Optional[str] = None
    content: str
    like_count: int
    helpful_count: int
    created_at: datetime
    updated_at: datetime
    is_archived: bool
    # Only filled in by the thread view
    author_name: Optional[str] = None
    author_avatar: Optional[str] = None
    replies: Optional[list["CommentDto"]] = None
