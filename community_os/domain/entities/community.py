"""
Community Entity - A tenant: branding, ownership and lifecycle.
"""

import re
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Optional
from uuid import uuid4

from community_os.domain.exceptions import DomainValidationError
from community_os.domain.value_objects import HexColor, validate_optional_url

DEFAULT_PRIMARY_COLOR = "#0066CC"
MAX_NAME_LENGTH = 100


class CommunityPrivacy(str, Enum):
    PUBLIC = "PUBLIC"
    PRIVATE = "PRIVATE"
    SECRET = "SECRET"


def slugify(name: str) -> str:
    slug = re.sub(r"[^a-z0-9]+", "-", name.lower()).strip("-")
    return slug or "community"


@dataclass
class Community:
    id: str
    name: str
    owner_id: str
    created_at: datetime
    updated_at: datetime
    logo_url: Optional[str] = None
    primary_color: str = DEFAULT_PRIMARY_COLOR
    slug: Optional[str] = None
    description: Optional[str] = None
    category: Optional[str] = None
    privacy: CommunityPrivacy = CommunityPrivacy.PUBLIC
    deleted_at: Optional[datetime] = None

    def __post_init__(self):
        self._validate_name(self.name)
        validate_optional_url(self.logo_url, "logo_url", "Logo URL")
        HexColor(self.primary_color)
        if not self.owner_id or not self.owner_id.strip():
            raise DomainValidationError("Owner ID is required", field="owner_id")

    @classmethod
    def create(
        cls,
        name: str,
        owner_id: str,
        logo_url: Optional[str] = None,
        primary_color: Optional[str] = None,
        slug: Optional[str] = None,
        description: Optional[str] = None,
        category: Optional[str] = None,
        privacy: CommunityPrivacy = CommunityPrivacy.PUBLIC,
    ) -> "Community":
        now = datetime.now(timezone.utc)
        return cls(
            id=str(uuid4()),
            name=name.strip() if name else name,
            owner_id=owner_id,
            created_at=now,
            updated_at=now,
            logo_url=logo_url,
            primary_color=primary_color or DEFAULT_PRIMARY_COLOR,
            slug=slug or slugify(name or ""),
            description=description,
            category=category,
            privacy=privacy,
        )

    @property
    def is_archived(self) -> bool:
        return self.deleted_at is not None

    def update_branding(
        self,
        name: Optional[str] = None,
        logo_url: Optional[str] = None,
        primary_color: Optional[str] = None,
        clear_logo: bool = False,
    ) -> None:
        self._ensure_not_archived()
        if name is not None:
            self._validate_name(name)
            self.name = name.strip()
        if clear_logo:
            self.logo_url = None
        elif logo_url is not None:
            validate_optional_url(logo_url, "logo_url", "Logo URL")
            self.logo_url = logo_url
        if primary_color is not None:
            HexColor(primary_color)
            self.primary_color = primary_color
        self.updated_at = datetime.now(timezone.utc)

    def transfer_ownership(self, new_owner_id: str) -> None:
        self._ensure_not_archived()
        if not new_owner_id or not new_owner_id.strip():
            raise DomainValidationError("New owner ID is required", field="owner_id")
        if new_owner_id == self.owner_id:
            raise DomainValidationError(
                "New owner must be different from current owner", field="same_owner"
            )
        self.owner_id = new_owner_id
        self.updated_at = datetime.now(timezone.utc)

    def archive(self) -> None:
        if self.is_archived:
            raise DomainValidationError("Community is already archived", field="archived")
        self.deleted_at = datetime.now(timezone.utc)
        self.updated_at = self.deleted_at

    def restore(self) -> None:
        if not self.is_archived:
            raise DomainValidationError("Community is not archived", field="archived")
        self.deleted_at = None
        self.updated_at = datetime.now(timezone.utc)

    def _ensure_not_archived(self) -> None:
        if self.is_archived:
            raise DomainValidationError("Cannot modify archived community", field="archived")

    @staticmethod
    def _validate_name(name: str) -> None:
        if not name or not name.strip():
            raise DomainValidationError("Community name is required", field="name")
        if len(name.strip()) > MAX_NAME_LENGTH:
            raise DomainValidationError(
                "Community name must not exceed 100 characters", field="name"
            )
