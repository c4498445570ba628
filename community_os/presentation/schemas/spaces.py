from typing import Literal, Optional

from pydantic import Field

from community_os.presentation.schemas.base import BoundedText, RequestSchema, RequiredId


class CreateSpaceSchema(RequestSchema):
    community_id: RequiredId("Community ID")
    name: BoundedText("Name", 1, 100)
    description: BoundedText("Description", 0, 500) = ""
    parent_space_id: Optional[RequiredId("Parent space ID")] = None
    icon: Optional[str] = None
    color: Optional[str] = None
    position: int = Field(default=0, ge=0)


class CreateChannelSchema(RequestSchema):
    community_id: RequiredId("Community ID")
    space_id: Optional[RequiredId("Space ID")] = None
    name: BoundedText("Name", 1, 100)
    description: BoundedText("Description", 0, 500) = ""
    permission: Literal["PUBLIC", "MEMBERS_ONLY", "TIER_GATED"] = "PUBLIC"
    required_tier_id: Optional[RequiredId("Required tier ID")] = None
    icon: Optional[str] = None
    position: int = Field(default=0, ge=0)
