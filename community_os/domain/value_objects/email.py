"""
Email Value Object - Normalised, validated email address.
"""

import re
from dataclasses import dataclass

from community_os.domain.exceptions import DomainValidationError

_EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
MAX_EMAIL_LENGTH = 255


@dataclass(frozen=True)
class Email:
    value: str

    def __post_init__(self):
        normalized = (self.value or "").strip().lower()
        if not normalized or not _EMAIL_PATTERN.match(normalized):
            raise DomainValidationError(f"Invalid email: {self.value}", field="email")
        if len(normalized) > MAX_EMAIL_LENGTH:
            raise DomainValidationError(
                "Email must not exceed 255 characters", field="email"
            )
        object.__setattr__(self, "value", normalized)

    def __str__(self) -> str:
        return self.value
