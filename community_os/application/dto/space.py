"""Space and channel DTOs. Timestamps are ISO-8601 strings."""

from typing import Optional

from community_os.application.dto.base import CamelModel


class SpaceDto(CamelModel):
    id: str
    community_id: str
    parent_space_id: Optional[str] = None
    name: str
    description: str
    icon: Optional[str] = None
    color: Optional[str] = None
    position: int
    created_by: str
    created_at: str
    updated_at: str
    deleted_at: Optional[str] = None


class ChannelDto(CamelModel):
    id: str
    community_id: str
    space_id: Optional[str] = None
    name: str
    description: str
    permission: str
    required_tier_id: Optional[str] = None
    icon: Optional[str] = None
    position: int
    created_by: str
    created_at: str
    updated_at: str
    deleted_at: Optional[str] = None
