"""
User Entity - A member of exactly one community.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional
from uuid import uuid4

from community_os.domain.exceptions import DomainValidationError
from community_os.domain.value_objects import Email, Role, validate_optional_url

MAX_NAME_LENGTH = 100
ONLINE_WINDOW = timedelta(minutes=15)


@dataclass
class User:
    # Required fields (no defaults) - must come first
    id: str
    email: Email
    role: Role
    community_id: str
    created_at: datetime
    updated_at: datetime
    # Optional fields (with defaults) - must come last
    name: Optional[str] = None
    avatar_url: Optional[str] = None
    deleted_at: Optional[datetime] = None
    # Never set until the member first reports presence
    last_seen_at: Optional[datetime] = None

    def __post_init__(self):
        if not isinstance(self.email, Email):
            self.email = Email(self.email)
        if not isinstance(self.role, Role):
            self.role = Role.parse(self.role)
        self._validate_name(self.name)
        validate_optional_url(self.avatar_url, "avatar_url", "Avatar URL")

    @classmethod
    def create(
        cls,
        email: str,
        role: Role,
        community_id: str,
        name: Optional[str] = None,
        avatar_url: Optional[str] = None,
        user_id: Optional[str] = None,
    ) -> "User":
        now = datetime.now(timezone.utc)
        return cls(
            id=user_id or str(uuid4()),
            email=Email(email),
            role=role,
            community_id=community_id,
            created_at=now,
            updated_at=now,
            name=name.strip() if name else name,
            avatar_url=avatar_url,
        )

    @property
    def is_archived(self) -> bool:
        return self.deleted_at is not None

    @property
    def display_name(self) -> str:
        return self.name or "Unknown"

    def update_profile(
        self,
        email: Optional[str] = None,
        name: Optional[str] = None,
        avatar_url: Optional[str] = None,
    ) -> None:
        self._ensure_not_archived()
        if email is not None:
            self.email = Email(email)
        if name is not None:
            self._validate_name(name)
            self.name = name.strip()
        if avatar_url is not None:
            validate_optional_url(avatar_url, "avatar_url", "Avatar URL")
            self.avatar_url = avatar_url
        self.updated_at = datetime.now(timezone.utc)

    def change_role(self, role: Role) -> None:
        self._ensure_not_archived()
        if role == self.role:
            raise DomainValidationError(
                "New role must be different from current role", field="same_role"
            )
        self.role = role
        self.updated_at = datetime.now(timezone.utc)

    def mark_seen(self, now: Optional[datetime] = None) -> None:
        """Presence heartbeat; also counts as activity for last-active sorting."""
        self._ensure_not_archived()
        self.last_seen_at = now or datetime.now(timezone.utc)
        self.updated_at = self.last_seen_at

    def is_online(self, now: Optional[datetime] = None) -> bool:
        if self.last_seen_at is None or self.is_archived:
            return False
        return (now or datetime.now(timezone.utc)) - self.last_seen_at <= ONLINE_WINDOW

    def has_role_or_higher(self, required: Role) -> bool:
        return self.role.has_role_or_higher(required)

    def archive(self) -> None:
        if self.is_archived:
            raise DomainValidationError("User is already archived", field="archived")
        self.deleted_at = datetime.now(timezone.utc)
        self.updated_at = self.deleted_at

    def _ensure_not_archived(self) -> None:
        if self.is_archived:
            raise DomainValidationError("Cannot modify archived user", field="archived")

    @staticmethod
    def _validate_name(name: Optional[str]) -> None:
        if name is None:
            return
        if not name.strip():
            raise DomainValidationError("Name cannot be empty", field="name")
        if len(name.strip()) > MAX_NAME_LENGTH:
            raise DomainValidationError("Name must not exceed 100 characters", field="name")
