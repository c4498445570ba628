"""
Space Entity - A section of a community; may nest one level under a root space.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional
from uuid import uuid4

from community_os.domain.exceptions import DomainValidationError


@dataclass
class Space:
    id: str
    community_id: str
    name: str
    description: str
    created_by: str
    created_at: datetime
    updated_at: datetime
    parent_space_id: Optional[str] = None
    icon: Optional[str] = None
    color: Optional[str] = None
    position: int = 0
    deleted_at: Optional[datetime] = None

    def __post_init__(self):
        validate_section_details(self.name, self.description, "Space")
        validate_position(self.position, "Space")

    @classmethod
    def create(
        cls,
        community_id: str,
        name: str,
        description: str,
        created_by: str,
        parent_space_id: Optional[str] = None,
        icon: Optional[str] = None,
        color: Optional[str] = None,
        position: int = 0,
    ) -> "Space":
        now = datetime.now(timezone.utc)
        return cls(
            id=str(uuid4()),
            community_id=community_id,
            name=name,
            description=description or "",
            created_by=created_by,
            created_at=now,
            updated_at=now,
            parent_space_id=parent_space_id,
            icon=icon,
            color=color,
            position=position,
        )

    @property
    def is_archived(self) -> bool:
        return self.deleted_at is not None

    @property
    def is_root(self) -> bool:
        return self.parent_space_id is None

    def archive(self) -> None:
        if self.is_archived:
            raise DomainValidationError("Space is already archived", field="archived")
        self.deleted_at = datetime.now(timezone.utc)
        self.updated_at = self.deleted_at


def validate_section_details(name: str, description: str, label: str) -> None:
    if not name or not name.strip():
        raise DomainValidationError(f"{label} name cannot be empty", field="name")
    if len(name) > 100:
        raise DomainValidationError(
            f"{label} name cannot exceed 100 characters", field="name"
        )
    if description and len(description) > 500:
        raise DomainValidationError(
            f"{label} description cannot exceed 500 characters", field="description"
        )


def validate_position(position: int, label: str) -> None:
    if not isinstance(position, int) or position < 0:
        raise DomainValidationError(
            f"{label} position cannot be negative", field="position"
        )
