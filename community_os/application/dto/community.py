"""Community and member DTOs."""

from datetime import datetime
from typing import Optional

from community_os.application.dto.base import CamelModel


class CommunityDto(CamelModel):
    id: str
    name: str
    logo_url: Optional[str] = None
    primary_color: str
    owner_id: str
    slug: Optional[str] = None
    description: Optional[str] = None
    category: Optional[str] = None
    privacy: str
    created_at: datetime
    updated_at: datetime
    is_archived: bool = False


class UserDto(CamelModel):
    id: str
    email: str
    name: Optional[str] = None
    role: str
    community_id: str
    avatar_url: Optional[str] = None
    created_at: datetime
    updated_at: datetime
    last_seen_at: Optional[datetime] = None


class CommunityStatsDto(CamelModel):
    community_id: str
    total_members: int
    # seen within the last 15 minutes
    online_members: int
    total_admins: int
    total_posts: int
    total_comments: int


class LeaderboardEntryDto(CamelModel):
    user_id: str
    user_name: str
    user_avatar: Optional[str] = None
    points: int
    post_count: int
    comment_count: int
    like_count: int
    rank: int


class LeaderboardDto(CamelModel):
    community_id: str
    entries: list[LeaderboardEntryDto]
    period: str
    generated_at: str


class MemberDto(CamelModel):
    id: str
    name: str
    email: str
    avatar: Optional[str] = None
    role: str
    joined_at: datetime
    last_active_at: datetime
    posts_count: int
    is_online: bool


class PaginationDto(CamelModel):
    total: int
    page: int
    limit: int
    total_pages: int


class MemberPageDto(CamelModel):
    members: list[MemberDto]
    pagination: PaginationDto


class MentionCandidateDto(CamelModel):
    id: str
    name: str
    avatar: Optional[str] = None
