"""
Channel Entity - A discussion stream, standalone or inside a space.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Optional
from uuid import uuid4

from community_os.domain.exceptions import DomainValidationError
from community_os.domain.entities.space import validate_section_details, validate_position


class ChannelPermission(str, Enum):
    PUBLIC = "PUBLIC"
    MEMBERS_ONLY = "MEMBERS_ONLY"
    TIER_GATED = "TIER_GATED"


@dataclass
class Channel:
    id: str
    community_id: str
    name: str
    description: str
    permission: ChannelPermission
    created_by: str
    created_at: datetime
    updated_at: datetime
    space_id: Optional[str] = None
    required_tier_id: Optional[str] = None
    icon: Optional[str] = None
    position: int = 0
    deleted_at: Optional[datetime] = None

    def __post_init__(self):
        validate_section_details(self.name, self.description, "Channel")
        validate_position(self.position, "Channel")
        self.permission = self._validate_permission(self.permission, self.required_tier_id)

    @classmethod
    def create(
        cls,
        community_id: str,
        name: str,
        description: str,
        permission: str,
        created_by: str,
        space_id: Optional[str] = None,
        required_tier_id: Optional[str] = None,
        icon: Optional[str] = None,
        position: int = 0,
    ) -> "Channel":
        now = datetime.now(timezone.utc)
        return cls(
            id=str(uuid4()),
            community_id=community_id,
            name=name,
            description=description or "",
            permission=permission,
            created_by=created_by,
            created_at=now,
            updated_at=now,
            space_id=space_id,
            required_tier_id=required_tier_id,
            icon=icon,
            position=position,
        )

    @property
    def is_archived(self) -> bool:
        return self.deleted_at is not None

    def has_access(self, user_tier_id: Optional[str]) -> bool:
        if self.permission == ChannelPermission.TIER_GATED:
            return user_tier_id is not None and user_tier_id == self.required_tier_id
        return True

    def archive(self) -> None:
        if self.is_archived:
            raise DomainValidationError("Channel is already archived", field="archived")
        self.deleted_at = datetime.now(timezone.utc)
        self.updated_at = self.deleted_at

    @staticmethod
    def _validate_permission(
        permission: str, required_tier_id: Optional[str]
    ) -> ChannelPermission:
        try:
            parsed = ChannelPermission(permission)
        except ValueError:
            raise DomainValidationError("Invalid channel permission", field="permission")
        if parsed == ChannelPermission.TIER_GATED and not required_tier_id:
            raise DomainValidationError(
                "Tier-gated channels must specify a required tier", field="permission"
            )
        if parsed != ChannelPermission.TIER_GATED and required_tier_id:
            raise DomainValidationError(
                "Only tier-gated channels can have a required tier", field="permission"
            )
        return parsed
