"""
Like Entity - A user's like on exactly one post or one comment.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional
from uuid import uuid4

from community_os.domain.exceptions import DomainValidationError


@dataclass(frozen=True)
class Like:
    id: str
    user_id: str
    created_at: datetime
    post_id: Optional[str] = None
    comment_id: Optional[str] = None

    def __post_init__(self):
        if (self.post_id is None) == (self.comment_id is None):
            raise DomainValidationError(
                "Like must target either a post or a comment", field="target"
            )

    @classmethod
    def for_post(cls, user_id: str, post_id: str) -> "Like":
        return cls(
            id=str(uuid4()),
            user_id=user_id,
            post_id=post_id,
            created_at=datetime.now(timezone.utc),
        )

    @classmethod
    def for_comment(cls, user_id: str, comment_id: str) -> "Like":
        return cls(
            id=str(uuid4()),
            user_id=user_id,
            comment_id=comment_id,
            created_at=datetime.now(timezone.utc),
        )
