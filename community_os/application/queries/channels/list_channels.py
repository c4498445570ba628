from dataclasses import dataclass
from typing import Optional

from community_os.application.common.errors import translate_errors
from community_os.application.common.interfaces import Query, QueryHandler
from community_os.application.dto import ChannelDto
from community_os.application.errors import ChannelError, ChannelErrorCode
from community_os.application.mappers import to_channel_dto
from community_os.domain.ports.repositories import ChannelRepository


@dataclass(frozen=True)
class ListChannelsQuery(Query[list[ChannelDto]]):
    community_id: str
    # None lists the standalone channels
    space_id: Optional[str] = None


class ListChannelsHandler(QueryHandler[list[ChannelDto]]):
    def __init__(self, channel_repository: ChannelRepository):
        self._channel_repository = channel_repository

    @translate_errors(ChannelError)
    async def execute(self, query: ListChannelsQuery) -> list[ChannelDto]:
        if not query.community_id:
            raise ChannelError(ChannelErrorCode.INVALID_INPUT, "Community ID is required")
        if query.space_id:
            channels = await self._channel_repository.find_by_space_id(query.space_id)
            channels = [c for c in channels if c.community_id == query.community_id]
        else:
            channels = await self._channel_repository.find_standalone(query.community_id)
        return [to_channel_dto(channel) for channel in channels]
