"""Forum post DTOs."""

from datetime import datetime
from typing import Optional

from community_os.application.dto.base import CamelModel
from community_os.application.dto.comment import CommentDto


class PostDto(CamelModel):
    id: str
    community_id: str
    author_id: str
    title: str
    content: str
    is_pinned: bool
    is_solved: bool
    like_count: int
    helpful_count: int
    comment_count: int
    view_count: int
    created_at: datetime
    updated_at: datetime
    # None while the post is a draft
    published_at: Optional[datetime] = None
    is_archived: bool


class PostDraftDto(CamelModel):
    id: str
    community_id: str
    author_id: str
    post_id: Optional[str] = None
    title: Optional[str] = None
    content: Optional[str] = None
    expires_at: str
    created_at: str
    updated_at: str


class LikeResultDto(CamelModel):
    is_liked: bool
    like_count: int


class PostThreadDto(CamelModel):
    post: PostDto
    author_name: str
    author_avatar: Optional[str] = None
    comments: list[CommentDto]
    user_has_liked: bool
