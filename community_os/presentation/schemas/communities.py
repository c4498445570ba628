from typing import Literal, Optional

from community_os.presentation.schemas.base import (
    BoundedText,
    HexColorString,
    RequestSchema,
    RequiredId,
    WebUrl,
)

Category = Literal[
    "education", "business", "creative", "fitness", "technology", "lifestyle", "gaming", "other"
]
Privacy = Literal["PUBLIC", "PRIVATE", "SECRET"]
RoleName = Literal["OWNER", "ADMIN", "MODERATOR", "MEMBER", "GUEST"]

CommunityName = BoundedText(
    "Name",
    3,
    100,
    pattern=r"^[a-zA-Z0-9\s_-]+$",
    pattern_message="Name can only contain letters, numbers, spaces, hyphens, and underscores",
)


class CreateCommunitySchema(RequestSchema):
    name: CommunityName
    description: Optional[BoundedText("Description", 10, 500)] = None
    slug: Optional[
        BoundedText(
            "Slug",
            3,
            100,
            pattern=r"^[a-z0-9-]+$",
            pattern_message="Slug can only contain lowercase letters, numbers, and hyphens",
        )
    ] = None
    category: Optional[Category] = None
    privacy: Privacy = "PUBLIC"
    logo_url: Optional[WebUrl("Logo URL")] = None
    primary_color: Optional[HexColorString] = None
    # Defaults to the authenticated user
    owner_id: Optional[RequiredId("Owner ID")] = None


class UpdateCommunitySchema(RequestSchema):
    name: Optional[CommunityName] = None
    logo_url: Optional[WebUrl("Logo URL")] = None
    primary_color: Optional[HexColorString] = None
    clear_logo: bool = False


class TransferOwnershipSchema(RequestSchema):
    new_owner_id: RequiredId("New owner ID")


class CreateUserSchema(RequestSchema):
    email: BoundedText("Email", 3, 255)
    name: Optional[BoundedText("Name", 1, 100)] = None
    role: RoleName = "MEMBER"
    community_id: RequiredId("Community ID")
    avatar_url: Optional[WebUrl("Avatar URL")] = None
    # Defaults to the authenticated subject
    user_id: Optional[RequiredId("User ID")] = None


class UpdateUserSchema(RequestSchema):
    email: Optional[BoundedText("Email", 3, 255)] = None
    name: Optional[BoundedText("Name", 1, 100)] = None
    avatar_url: Optional[WebUrl("Avatar URL")] = None


class ChangeUserRoleSchema(RequestSchema):
    role: RoleName
