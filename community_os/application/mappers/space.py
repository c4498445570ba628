from community_os.application.dto import ChannelDto, SpaceDto
from community_os.application.mappers.common import to_iso
from community_os.domain.entities import Channel, Space


def to_space_dto(space: Space) -> SpaceDto:
    return SpaceDto(
        id=space.id,
        community_id=space.community_id,
        parent_space_id=space.parent_space_id,
        name=space.name,
        description=space.description,
        icon=space.icon,
        color=space.color,
        position=space.position,
        created_by=space.created_by,
        created_at=to_iso(space.created_at),
        updated_at=to_iso(space.updated_at),
        deleted_at=to_iso(space.deleted_at),
    )


def to_channel_dto(channel: Channel) -> ChannelDto:
    return ChannelDto(
        id=channel.id,
        community_id=channel.community_id,
        space_id=channel.space_id,
        name=channel.name,
        description=channel.description,
        permission=channel.permission.value,
        required_tier_id=channel.required_tier_id,
        icon=channel.icon,
        position=channel.position,
        created_by=channel.created_by,
        created_at=to_iso(channel.created_at),
        updated_at=to_iso(channel.updated_at),
        deleted_at=to_iso(channel.deleted_at),
    )
