"""Spaces and channels API Router."""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from dishka.integrations.fastapi import FromDishka, inject

from community_os.application.commands.channels import (
    ArchiveChannelCommand,
    ArchiveChannelHandler,
    CreateChannelCommand,
    CreateChannelHandler,
)
from community_os.application.commands.spaces import (
    ArchiveSpaceCommand,
    ArchiveSpaceHandler,
    CreateSpaceCommand,
    CreateSpaceHandler,
)
from community_os.application.dto.space import ChannelDto, SpaceDto
from community_os.application.queries.channels import ListChannelsHandler, ListChannelsQuery
from community_os.application.queries.spaces import ListSpacesHandler, ListSpacesQuery
from community_os.presentation.dependencies.auth import AuthUser, get_current_user
from community_os.presentation.schemas.spaces import CreateChannelSchema, CreateSpaceSchema

router = APIRouter(prefix="/api", tags=["spaces"])


@router.post("/spaces", response_model=SpaceDto, status_code=status.HTTP_201_CREATED)
@inject
async def create_space(
    body: CreateSpaceSchema,
    handler: FromDishka[CreateSpaceHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    command = CreateSpaceCommand(
        community_id=body.community_id,
        name=body.name,
        description=body.description,
        created_by=current_user.user_id,
        parent_space_id=body.parent_space_id,
        icon=body.icon,
        color=body.color,
        position=body.position,
    )
    return await handler.execute(command)


@router.get("/communities/{community_id}/spaces", response_model=list[SpaceDto])
@inject
async def list_spaces(
    community_id: str,
    handler: FromDishka[ListSpacesHandler],
    parent_space_id: Optional[str] = Query(default=None, alias="parentSpaceId"),
):
    """Root spaces, or the children of parentSpaceId."""
    query = ListSpacesQuery(community_id=community_id, parent_space_id=parent_space_id)
    return await handler.execute(query)


@router.delete("/spaces/{space_id}", response_model=SpaceDto)
@inject
async def archive_space(space_id: str, handler: FromDishka[ArchiveSpaceHandler]):
    return await handler.execute(ArchiveSpaceCommand(space_id=space_id))


@router.post("/channels", response_model=ChannelDto, status_code=status.HTTP_201_CREATED)
@inject
async def create_channel(
    body: CreateChannelSchema,
    handler: FromDishka[CreateChannelHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    command = CreateChannelCommand(
        community_id=body.community_id,
        name=body.name,
        description=body.description,
        permission=body.permission,
        created_by=current_user.user_id,
        space_id=body.space_id,
        required_tier_id=body.required_tier_id,
        icon=body.icon,
        position=body.position,
    )
    return await handler.execute(command)


@router.get("/communities/{community_id}/channels", response_model=list[ChannelDto])
@inject
async def list_channels(
    community_id: str,
    handler: FromDishka[ListChannelsHandler],
    space_id: Optional[str] = Query(default=None, alias="spaceId"),
):
    """Channels in spaceId, or the community's standalone channels."""
    query = ListChannelsQuery(community_id=community_id, space_id=space_id)
    return await handler.execute(query)


@router.delete("/channels/{channel_id}", response_model=ChannelDto)
@inject
async def archive_channel(channel_id: str, handler: FromDishka[ArchiveChannelHandler]):
    return await handler.execute(ArchiveChannelCommand(channel_id=channel_id))
