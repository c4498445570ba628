"""
Role Value Object - Community membership roles, ordered by privilege.
"""

from enum import Enum

from community_os.domain.exceptions import DomainValidationError


class Role(str, Enum):
    OWNER = "OWNER"
    ADMIN = "ADMIN"
    MODERATOR = "MODERATOR"
    MEMBER = "MEMBER"
    GUEST = "GUEST"

    @property
    def level(self) -> int:
        return _ROLE_LEVELS[self]

    def has_role_or_higher(self, required: "Role") -> bool:
        return self.level >= required.level

    @classmethod
    def parse(cls, value: str) -> "Role":
        try:
            return cls(value)
        except ValueError:
            raise DomainValidationError(f"Invalid role: {value}", field="role")


_ROLE_LEVELS = {
    Role.OWNER: 5,
    Role.ADMIN: 4,
    Role.MODERATOR: 3,
    Role.MEMBER: 2,
    Role.GUEST: 1,
}
