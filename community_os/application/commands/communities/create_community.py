"""
Create Community Command.

- Command: @dataclass(frozen=True) holding input data
- Handler: receives repository via __init__ (DI)
- Returns: CommunityDto
"""

from dataclasses import dataclass
from typing import Optional

from community_os.application.common.errors import translate_errors
from community_os.application.common.interfaces import Command, CommandHandler
from community_os.application.dto import CommunityDto
from community_os.application.errors import CommunityError, CommunityErrorCode
from community_os.application.mappers import to_community_dto
from community_os.domain.entities import Community, CommunityPrivacy
from community_os.domain.ports.repositories import CommunityRepository


@dataclass(frozen=True)
class CreateCommunityCommand(Command[CommunityDto]):
    name: str
    owner_id: str
    logo_url: Optional[str] = None
    primary_color: Optional[str] = None
    slug: Optional[str] = None
    description: Optional[str] = None
    category: Optional[str] = None
    privacy: str = CommunityPrivacy.PUBLIC.value


class CreateCommunityHandler(CommandHandler[CommunityDto]):
    _community_repository: CommunityRepository

    def __init__(self, community_repository: CommunityRepository):
        self._community_repository = community_repository

    @translate_errors(CommunityError)
    async def execute(self, command: CreateCommunityCommand) -> CommunityDto:
        if not command.name or not command.owner_id:
            raise CommunityError(
                CommunityErrorCode.INVALID_INPUT, "Name and owner ID are required"
            )
        community = Community.create(
            name=command.name,
            owner_id=command.owner_id,
            logo_url=command.logo_url,
            primary_color=command.primary_color,
            slug=command.slug,
            description=command.description,
            category=command.category,
            privacy=CommunityPrivacy(command.privacy),
        )
        created = await self._community_repository.create(community)
        return to_community_dto(created)
