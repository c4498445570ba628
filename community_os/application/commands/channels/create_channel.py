from dataclasses import dataclass
from typing import Optional

from community_os.application.common.errors import translate_errors
from community_os.application.common.interfaces import Command, CommandHandler
from community_os.application.dto import ChannelDto
from community_os.application.errors import ChannelError, ChannelErrorCode
from community_os.application.mappers import to_channel_dto
from community_os.domain.entities import Channel
from community_os.domain.ports.repositories import (
    ChannelRepository,
    CommunityRepository,
    PaymentTierRepository,
    SpaceRepository,
)


@dataclass(frozen=True)
class CreateChannelCommand(Command[ChannelDto]):
    community_id: str
    name: str
    description: str
    permission: str
    created_by: str
    space_id: Optional[str] = None
    required_tier_id: Optional[str] = None
    icon: Optional[str] = None
    position: int = 0


class CreateChannelHandler(CommandHandler[ChannelDto]):
    def __init__(
        self,
        channel_repository: ChannelRepository,
        community_repository: CommunityRepository,
        space_repository: SpaceRepository,
        payment_tier_repository: PaymentTierRepository,
    ):
        self._channel_repository = channel_repository
        self._community_repository = community_repository
        self._space_repository = space_repository
        self._payment_tier_repository = payment_tier_repository

    @translate_errors(ChannelError)
    async def execute(self, command: CreateChannelCommand) -> ChannelDto:
        if not command.community_id or not command.created_by:
            raise ChannelError(
                ChannelErrorCode.INVALID_INPUT, "Community ID and creator are required"
            )

        community = await self._community_repository.find_by_id(command.community_id)
        if community is None or community.is_archived:
            raise ChannelError(ChannelErrorCode.COMMUNITY_NOT_FOUND)

        if command.space_id:
            space = await self._space_repository.find_by_id(command.space_id)
            if space is None or space.is_archived or space.community_id != community.id:
                raise ChannelError(ChannelErrorCode.SPACE_NOT_FOUND)

        if command.required_tier_id:
            tier = await self._payment_tier_repository.find_by_id(command.required_tier_id)
            if tier is None or tier.community_id != community.id:
                raise ChannelError(ChannelErrorCode.TIER_NOT_FOUND)

        channel = Channel.create(
            community_id=command.community_id,
            name=command.name,
            description=command.description,
            permission=command.permission,
            created_by=command.created_by,
            space_id=command.space_id,
            required_tier_id=command.required_tier_id,
            icon=command.icon,
            position=command.position,
        )
        created = await self._channel_repository.create(channel)
        return to_channel_dto(created)
