"""Communities and members API Router."""

from fastapi import APIRouter, Depends, Query, status
from dishka.integrations.fastapi import FromDishka, inject

from community_os.application.commands.communities import (
    ArchiveCommunityCommand,
    ArchiveCommunityHandler,
    CreateCommunityCommand,
    CreateCommunityHandler,
    TransferOwnershipCommand,
    TransferOwnershipHandler,
    UpdateCommunityCommand,
    UpdateCommunityHandler,
)
from community_os.application.commands.users import (
    ArchiveUserCommand,
    ArchiveUserHandler,
    ChangeUserRoleCommand,
    ChangeUserRoleHandler,
    CreateUserCommand,
    CreateUserHandler,
    RecordPresenceCommand,
    RecordPresenceHandler,
    UpdateUserCommand,
    UpdateUserHandler,
)
from community_os.application.dto.community import (
    CommunityDto,
    CommunityStatsDto,
    LeaderboardDto,
    MemberPageDto,
    MentionCandidateDto,
    UserDto,
)
from community_os.application.queries.communities import (
    GetCommunityHandler,
    GetCommunityQuery,
    GetCommunityStatsHandler,
    GetCommunityStatsQuery,
    GetLeaderboardHandler,
    GetLeaderboardQuery,
    ListCommunitiesHandler,
    ListCommunitiesQuery,
)
from community_os.application.queries.users import (
    GetUserHandler,
    GetUserQuery,
    ListMembersHandler,
    ListMembersQuery,
    ListUsersHandler,
    ListUsersQuery,
    SearchMentionsHandler,
    SearchMentionsQuery,
)
from community_os.presentation.dependencies.auth import AuthUser, get_current_user
from community_os.presentation.schemas.communities import (
    ChangeUserRoleSchema,
    CreateCommunitySchema,
    CreateUserSchema,
    TransferOwnershipSchema,
    UpdateCommunitySchema,
    UpdateUserSchema,
)

router = APIRouter(prefix="/api", tags=["communities"])


# ==================== COMMUNITIES ====================


@router.post("/communities", response_model=CommunityDto, status_code=status.HTTP_201_CREATED)
@inject
async def create_community(
    body: CreateCommunitySchema,
    handler: FromDishka[CreateCommunityHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    """Create a community owned by the caller unless ownerId is given."""
    command = CreateCommunityCommand(
        name=body.name,
        owner_id=body.owner_id or current_user.user_id,
        logo_url=body.logo_url,
        primary_color=body.primary_color,
        slug=body.slug,
        description=body.description,
        category=body.category,
        privacy=body.privacy,
    )
    return await handler.execute(command)


@router.get("/communities", response_model=list[CommunityDto])
@inject
async def list_communities(handler: FromDishka[ListCommunitiesHandler]):
    return await handler.execute(ListCommunitiesQuery())


@router.get("/communities/{community_id}", response_model=CommunityDto)
@inject
async def get_community(community_id: str, handler: FromDishka[GetCommunityHandler]):
    return await handler.execute(GetCommunityQuery(community_id=community_id))


@router.patch("/communities/{community_id}", response_model=CommunityDto)
@inject
async def update_community(
    community_id: str,
    body: UpdateCommunitySchema,
    handler: FromDishka[UpdateCommunityHandler],
):
    command = UpdateCommunityCommand(
        community_id=community_id,
        name=body.name,
        logo_url=body.logo_url,
        primary_color=body.primary_color,
        clear_logo=body.clear_logo,
    )
    return await handler.execute(command)


@router.post("/communities/{community_id}/transfer", response_model=CommunityDto)
@inject
async def transfer_ownership(
    community_id: str,
    body: TransferOwnershipSchema,
    handler: FromDishka[TransferOwnershipHandler],
):
    command = TransferOwnershipCommand(community_id=community_id, new_owner_id=body.new_owner_id)
    return await handler.execute(command)


@router.delete("/communities/{community_id}", response_model=CommunityDto)
@inject
async def archive_community(community_id: str, handler: FromDishka[ArchiveCommunityHandler]):
    return await handler.execute(ArchiveCommunityCommand(community_id=community_id))


@router.get("/communities/{community_id}/members", response_model=list[UserDto])
@inject
async def list_members(community_id: str, handler: FromDishka[ListUsersHandler]):
    return await handler.execute(ListUsersQuery(community_id=community_id))


# ==================== USERS ====================


@router.post("/users", response_model=UserDto, status_code=status.HTTP_201_CREATED)
@inject
async def create_user(
    body: CreateUserSchema,
    handler: FromDishka[CreateUserHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    """
    Register a member profile.

    Without userId the profile is bound to the caller's identity-provider
    subject (self sign-up).
    """
    command = CreateUserCommand(
        email=body.email,
        role=body.role,
        community_id=body.community_id,
        name=body.name,
        avatar_url=body.avatar_url,
        user_id=body.user_id or current_user.user_id,
    )
    return await handler.execute(command)


@router.get("/users/me", response_model=UserDto)
@inject
async def get_me(
    handler: FromDishka[GetUserHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    return await handler.execute(GetUserQuery(user_id=current_user.user_id))


@router.get("/users/{user_id}", response_model=UserDto)
@inject
async def get_user(user_id: str, handler: FromDishka[GetUserHandler]):
    return await handler.execute(GetUserQuery(user_id=user_id))


@router.patch("/users/{user_id}", response_model=UserDto)
@inject
async def update_user(
    user_id: str,
    body: UpdateUserSchema,
    handler: FromDishka[UpdateUserHandler],
):
    command = UpdateUserCommand(
        user_id=user_id,
        email=body.email,
        name=body.name,
        avatar_url=body.avatar_url,
    )
    return await handler.execute(command)


@router.put("/users/{user_id}/role", response_model=UserDto)
@inject
async def change_user_role(
    user_id: str,
    body: ChangeUserRoleSchema,
    handler: FromDishka[ChangeUserRoleHandler],
):
    return await handler.execute(ChangeUserRoleCommand(user_id=user_id, role=body.role))


@router.delete("/users/{user_id}", response_model=UserDto)
@inject
async def archive_user(user_id: str, handler: FromDishka[ArchiveUserHandler]):
    return await handler.execute(ArchiveUserCommand(user_id=user_id))


@router.post("/users/me/presence", response_model=UserDto)
@inject
async def record_presence(
    handler: FromDishka[RecordPresenceHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    """Heartbeat sent by open clients; keeps the caller counted as online."""
    return await handler.execute(RecordPresenceCommand(user_id=current_user.user_id))


# ==================== ACTIVITY ====================


@router.get("/communities/{community_id}/stats", response_model=CommunityStatsDto)
@inject
async def get_community_stats(community_id: str, handler: FromDishka[GetCommunityStatsHandler]):
    return await handler.execute(GetCommunityStatsQuery(community_id=community_id))


@router.get("/communities/{community_id}/leaderboard", response_model=LeaderboardDto)
@inject
async def get_leaderboard(
    community_id: str,
    handler: FromDishka[GetLeaderboardHandler],
    limit: int = Query(default=5),
    period: str = Query(default="all-time"),
):
    query = GetLeaderboardQuery(community_id=community_id, limit=limit, period=period)
    return await handler.execute(query)


@router.get("/members", response_model=MemberPageDto)
@inject
async def list_member_directory(
    handler: FromDishka[ListMembersHandler],
    community_id: str = Query(default="", alias="communityId"),
    page: int = Query(default=1),
    limit: int = Query(default=20),
    sort_by: str = Query(default="joinedAt", alias="sortBy"),
    sort_order: str = Query(default="desc", alias="sortOrder"),
):
    """Paginated member directory with post counts and online flags."""
    query = ListMembersQuery(
        community_id=community_id,
        page=page,
        limit=limit,
        sort_by=sort_by,
        sort_order=sort_order,
    )
    return await handler.execute(query)


@router.get("/mentions/search", response_model=list[MentionCandidateDto])
@inject
async def search_mentions(
    handler: FromDishka[SearchMentionsHandler],
    q: str = Query(default=""),
    community_id: str = Query(default="", alias="communityId"),
):
    return await handler.execute(SearchMentionsQuery(community_id=community_id, q=q))
