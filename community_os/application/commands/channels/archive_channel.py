from dataclasses import dataclass

from community_os.application.common.errors import translate_errors
from community_os.application.common.interfaces import Command, CommandHandler
from community_os.application.dto import ChannelDto
from community_os.application.errors import ChannelError, ChannelErrorCode
from community_os.application.mappers import to_channel_dto
from community_os.domain.ports.repositories import ChannelRepository


@dataclass(frozen=True)
class ArchiveChannelCommand(Command[ChannelDto]):
    channel_id: str


class ArchiveChannelHandler(CommandHandler[ChannelDto]):
    def __init__(self, channel_repository: ChannelRepository):
        self._channel_repository = channel_repository

    @translate_errors(ChannelError)
    async def execute(self, command: ArchiveChannelCommand) -> ChannelDto:
        channel = await self._channel_repository.find_by_id(command.channel_id)
        if channel is None:
            raise ChannelError(ChannelErrorCode.CHANNEL_NOT_FOUND)
        if channel.is_archived:
            raise ChannelError(ChannelErrorCode.CHANNEL_ALREADY_ARCHIVED)

        channel.archive()
        await self._channel_repository.delete(channel.id)
        return to_channel_dto(channel)
