"""
ContentVersion Entity - Immutable snapshot of a post or comment body.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from uuid import uuid4

from community_os.domain.exceptions import DomainValidationError


class ContentType(str, Enum):
    POST = "POST"
    COMMENT = "COMMENT"


@dataclass(frozen=True)
class ContentVersion:
    id: str
    content_type: ContentType
    content_id: str
    content: str
    version_number: int
    created_at: datetime

    def __post_init__(self):
        if not self.content or not self.content.strip():
            raise DomainValidationError(
                "Content snapshot is required and cannot be empty", field="content"
            )
        if not isinstance(self.version_number, int) or self.version_number < 1:
            raise DomainValidationError(
                "Version number must be an integer of at least 1", field="version_number"
            )
        object.__setattr__(self, "content_type", ContentType(self.content_type))

    @classmethod
    def create(
        cls, content_type: ContentType, content_id: str, content: str, version_number: int
    ) -> "ContentVersion":
        return cls(
            id=str(uuid4()),
            content_type=content_type,
            content_id=content_id,
            content=content,
            version_number=version_number,
            created_at=datetime.now(timezone.utc),
        )
