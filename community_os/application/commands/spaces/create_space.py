"""
Create Space Command.

Spaces nest one level deep: a parent must be a root space of the same community.
"""

from dataclasses import dataclass
from typing import Optional

from community_os.application.common.errors import translate_errors
from community_os.application.common.interfaces import Command, CommandHandler
from community_os.application.dto import SpaceDto
from community_os.application.errors import SpaceError, SpaceErrorCode
from community_os.application.mappers import to_space_dto
from community_os.domain.entities import Space
from community_os.domain.ports.repositories import CommunityRepository, SpaceRepository


@dataclass(frozen=True)
class CreateSpaceCommand(Command[SpaceDto]):
    community_id: str
    name: str
    description: str
    created_by: str
    parent_space_id: Optional[str] = None
    icon: Optional[str] = None
    color: Optional[str] = None
    position: int = 0


class CreateSpaceHandler(CommandHandler[SpaceDto]):
    def __init__(
        self, space_repository: SpaceRepository, community_repository: CommunityRepository
    ):
        self._space_repository = space_repository
        self._community_repository = community_repository

    @translate_errors(SpaceError)
    async def execute(self, command: CreateSpaceCommand) -> SpaceDto:
        if not command.community_id or not command.created_by:
            raise SpaceError(SpaceErrorCode.INVALID_INPUT, "Community ID and creator are required")

        community = await self._community_repository.find_by_id(command.community_id)
        if community is None or community.is_archived:
            raise SpaceError(SpaceErrorCode.COMMUNITY_NOT_FOUND)

        if command.parent_space_id:
            parent = await self._space_repository.find_by_id(command.parent_space_id)
            if (
                parent is None
                or parent.is_archived
                or parent.community_id != command.community_id
            ):
                raise SpaceError(SpaceErrorCode.PARENT_SPACE_NOT_FOUND)
            if not parent.is_root:
                raise SpaceError(
                    SpaceErrorCode.MAX_NESTING_DEPTH_EXCEEDED,
                    "Spaces can only be nested one level deep",
                )

        space = Space.create(
            community_id=command.community_id,
            name=command.name,
            description=command.description,
            created_by=command.created_by,
            parent_space_id=command.parent_space_id,
            icon=command.icon,
            color=command.color,
            position=command.position,
        )
        created = await self._space_repository.create(space)
        return to_space_dto(created)
