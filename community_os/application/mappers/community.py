"""Entity -> DTO mappers for communities and members."""

from datetime import datetime
from typing import Optional

from community_os.application.dto import CommunityDto, MemberDto, MentionCandidateDto, UserDto
from community_os.domain.entities import Community, User


def to_community_dto(community: Community) -> CommunityDto:
    return CommunityDto(
        id=community.id,
        name=community.name,
        logo_url=community.logo_url,
        primary_color=community.primary_color,
        owner_id=community.owner_id,
        slug=community.slug,
        description=community.description,
        category=community.category,
        privacy=community.privacy.value,
        created_at=community.created_at,
        updated_at=community.updated_at,
        is_archived=community.is_archived,
    )


def to_user_dto(user: User) -> UserDto:
    return UserDto(
        id=user.id,
        email=user.email.value,
        name=user.name,
        role=user.role.value,
        community_id=user.community_id,
        avatar_url=user.avatar_url,
        created_at=user.created_at,
        updated_at=user.updated_at,
        last_seen_at=user.last_seen_at,
    )


def to_member_dto(user: User, posts_count: int, now: Optional[datetime] = None) -> MemberDto:
    return MemberDto(
        id=user.id,
        name=user.display_name,
        email=user.email.value,
        avatar=user.avatar_url,
        role=user.role.value,
        joined_at=user.created_at,
        last_active_at=user.updated_at,
        posts_count=posts_count,
        is_online=user.is_online(now),
    )


def to_mention_candidate_dto(user: User) -> MentionCandidateDto:
    return MentionCandidateDto(id=user.id, name=user.display_name, avatar=user.avatar_url)
