from typing import Literal, Optional

from pydantic import Field

from community_os.presentation.schemas.base import RequestSchema, UUIDString


class SearchQuerySchema(RequestSchema):
    q: str = Field(min_length=1)
    type: Literal["posts", "comments", "users", "all"] = "all"
    community_id: Optional[UUIDString("Community ID must be a valid UUID")] = None
    limit: int = Field(default=20, ge=1, le=100)
    offset: int = Field(default=0, ge=0)
