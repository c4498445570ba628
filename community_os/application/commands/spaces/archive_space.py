from dataclasses import dataclass

from community_os.application.common.errors import translate_errors
from community_os.application.common.interfaces import Command, CommandHandler
from community_os.application.dto import SpaceDto
from community_os.application.errors import SpaceError, SpaceErrorCode
from community_os.application.mappers import to_space_dto
from community_os.domain.ports.repositories import SpaceRepository


@dataclass(frozen=True)
class ArchiveSpaceCommand(Command[SpaceDto]):
    space_id: str


class ArchiveSpaceHandler(CommandHandler[SpaceDto]):
    def __init__(self, space_repository: SpaceRepository):
        self._space_repository = space_repository

    @translate_errors(SpaceError)
    async def execute(self, command: ArchiveSpaceCommand) -> SpaceDto:
        space = await self._space_repository.find_by_id(command.space_id)
        if space is None:
            raise SpaceError(SpaceErrorCode.SPACE_NOT_FOUND)
        if space.is_archived:
            raise SpaceError(SpaceErrorCode.SPACE_ALREADY_ARCHIVED)

        space.archive()
        await self._space_repository.delete(space.id)
        return to_space_dto(space)
