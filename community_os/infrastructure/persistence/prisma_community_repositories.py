"""
Prisma repositories for communities, members, spaces and channels.

Mapping:
- Records carry the same snake_case columns as the domain entities
- Enum columns come back as str enums and are re-wrapped in domain enums
- Email is stored normalised; Email(...) re-validates on read
- Archiving sets deleted_at; list queries filter on deleted_at = null
"""

from typing import Any, Dict, Optional

from prisma import Prisma
from prisma.models import Channel as PrismaChannel
from prisma.models import Community as PrismaCommunity
from prisma.models import Space as PrismaSpace
from prisma.models import User as PrismaUser

from community_os.domain.entities import (
    Channel,
    ChannelPermission,
    Community,
    CommunityPrivacy,
    Space,
    User,
)
from community_os.domain.ports.repositories import (
    MEMBER_SORT_COLUMNS,
    ChannelRepository,
    CommunityRepository,
    SpaceRepository,
    UserRepository,
)
from community_os.domain.value_objects import Email, Role
from community_os.infrastructure.persistence.prisma_support import archived_now


class PrismaCommunityRepository(CommunityRepository):
    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        self._prisma = prisma

    def _to_entity(self, record: PrismaCommunity) -> Community:
        """Map Prisma record to domain entity."""
        return Community(
            id=record.id,
            name=record.name,
            owner_id=record.owner_id,
            created_at=record.created_at,
            updated_at=record.updated_at,
            logo_url=record.logo_url,
            primary_color=record.primary_color,
            slug=record.slug,
            description=record.description,
            category=record.category,
            privacy=CommunityPrivacy(record.privacy),
            deleted_at=record.deleted_at,
        )

    def _to_data(self, community: Community) -> Dict[str, Any]:
        return {
            "name": community.name,
            "owner_id": community.owner_id,
            "logo_url": community.logo_url,
            "primary_color": community.primary_color,
            "slug": community.slug,
            "description": community.description,
            "category": community.category,
            "privacy": community.privacy.value,
            "created_at": community.created_at,
            "updated_at": community.updated_at,
            "deleted_at": community.deleted_at,
        }

    async def create(self, community: Community) -> Community:
        record = await self._prisma.community.create(
            data={"id": community.id, **self._to_data(community)}
        )
        return self._to_entity(record)

    async def find_by_id(self, community_id: str) -> Optional[Community]:
        record = await self._prisma.community.find_unique(where={"id": community_id})
        return self._to_entity(record) if record else None

    async def find_all(self) -> list[Community]:
        records = await self._prisma.community.find_many(
            where={"deleted_at": None},
            order={"created_at": "asc"},
        )
        return [self._to_entity(r) for r in records]

    async def update(self, community: Community) -> Community:
        record = await self._prisma.community.update(
            where={"id": community.id},
            data=self._to_data(community),
        )
        return self._to_entity(record) if record else community

    async def delete(self, community_id: str) -> None:
        await self._prisma.community.update_many(
            where={"id": community_id, "deleted_at": None},
            data=archived_now(),
        )


class PrismaUserRepository(UserRepository):
    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        self._prisma = prisma

    def _to_entity(self, record: PrismaUser) -> User:
        return User(
            id=record.id,
            email=Email(record.email),
            role=Role(record.role),
            community_id=record.community_id,
            created_at=record.created_at,
            updated_at=record.updated_at,
            name=record.name,
            avatar_url=record.avatar_url,
            deleted_at=record.deleted_at,
            last_seen_at=record.last_seen_at,
        )

    def _to_data(self, user: User) -> Dict[str, Any]:
        return {
            "email": user.email.value,
            "name": user.name,
            "avatar_url": user.avatar_url,
            "role": user.role.value,
            "community_id": user.community_id,
            "created_at": user.created_at,
            "updated_at": user.updated_at,
            "deleted_at": user.deleted_at,
            "last_seen_at": user.last_seen_at,
        }

    async def create(self, user: User) -> User:
        record = await self._prisma.user.create(data={"id": user.id, **self._to_data(user)})
        return self._to_entity(record)

    async def find_by_id(self, user_id: str) -> Optional[User]:
        record = await self._prisma.user.find_unique(where={"id": user_id})
        return self._to_entity(record) if record else None

    async def find_by_email(self, email: str) -> Optional[User]:
        record = await self._prisma.user.find_unique(where={"email": email.strip().lower()})
        return self._to_entity(record) if record else None

    async def find_by_community_id(self, community_id: str) -> list[User]:
        records = await self._prisma.user.find_many(
            where={"community_id": community_id, "deleted_at": None},
            order={"created_at": "asc"},
        )
        return [self._to_entity(r) for r in records]

    async def find_page(
        self,
        community_id: str,
        sort_column: str,
        descending: bool,
        offset: int,
        limit: int,
    ) -> list[User]:
        if sort_column not in MEMBER_SORT_COLUMNS:
            raise ValueError(f"Unsupported member sort column: {sort_column}")
        records = await self._prisma.user.find_many(
            where={"community_id": community_id, "deleted_at": None},
            order=[{sort_column: "desc" if descending else "asc"}, {"created_at": "asc"}],
            skip=offset,
            take=limit,
        )
        return [self._to_entity(r) for r in records]

    async def count_by_community_id(self, community_id: str) -> int:
        return await self._prisma.user.count(
            where={"community_id": community_id, "deleted_at": None}
        )

    async def find_by_name_prefix(
        self, community_id: str, prefix: str, limit: int
    ) -> list[User]:
        # First word via startsWith, later words via a leading space
        records = await self._prisma.user.find_many(
            where={
                "community_id": community_id,
                "deleted_at": None,
                "OR": [
                    {"name": {"startsWith": prefix, "mode": "insensitive"}},
                    {"name": {"contains": f" {prefix}", "mode": "insensitive"}},
                ],
            },
            order={"name": "asc"},
            take=limit,
        )
        return [self._to_entity(r) for r in records]

    async def update(self, user: User) -> User:
        record = await self._prisma.user.update(
            where={"id": user.id},
            data=self._to_data(user),
        )
        return self._to_entity(record) if record else user

    async def delete(self, user_id: str) -> None:
        await self._prisma.user.update_many(
            where={"id": user_id, "deleted_at": None},
            data=archived_now(),
        )


class PrismaSpaceRepository(SpaceRepository):
    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        self._prisma = prisma

    def _to_entity(self, record: PrismaSpace) -> Space:
        return Space(
            id=record.id,
            community_id=record.community_id,
            name=record.name,
            description=record.description,
            created_by=record.created_by,
            created_at=record.created_at,
            updated_at=record.updated_at,
            parent_space_id=record.parent_space_id,
            icon=record.icon,
            color=record.color,
            position=record.position,
            deleted_at=record.deleted_at,
        )

    def _to_data(self, space: Space) -> Dict[str, Any]:
        return {
            "community_id": space.community_id,
            "name": space.name,
            "description": space.description,
            "parent_space_id": space.parent_space_id,
            "icon": space.icon,
            "color": space.color,
            "position": space.position,
            "created_by": space.created_by,
            "created_at": space.created_at,
            "updated_at": space.updated_at,
            "deleted_at": space.deleted_at,
        }

    async def create(self, space: Space) -> Space:
        record = await self._prisma.space.create(data={"id": space.id, **self._to_data(space)})
        return self._to_entity(record)

    async def find_by_id(self, space_id: str) -> Optional[Space]:
        record = await self._prisma.space.find_unique(where={"id": space_id})
        return self._to_entity(record) if record else None

    async def find_root_spaces(self, community_id: str) -> list[Space]:
        records = await self._prisma.space.find_many(
            where={"community_id": community_id, "parent_space_id": None, "deleted_at": None},
            order=[{"position": "asc"}, {"created_at": "asc"}],
        )
        return [self._to_entity(r) for r in records]

    async def find_children(self, parent_space_id: str) -> list[Space]:
        records = await self._prisma.space.find_many(
            where={"parent_space_id": parent_space_id, "deleted_at": None},
            order=[{"position": "asc"}, {"created_at": "asc"}],
        )
        return [self._to_entity(r) for r in records]

    async def update(self, space: Space) -> Space:
        record = await self._prisma.space.update(
            where={"id": space.id},
            data=self._to_data(space),
        )
        return self._to_entity(record) if record else space

    async def delete(self, space_id: str) -> None:
        await self._prisma.space.update_many(
            where={"id": space_id, "deleted_at": None},
            data=archived_now(),
        )


class PrismaChannelRepository(ChannelRepository):
    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        self._prisma = prisma

    def _to_entity(self, record: PrismaChannel) -> Channel:
        return Channel(
            id=record.id,
            community_id=record.community_id,
            name=record.name,
            description=record.description,
            permission=ChannelPermission(record.permission),
            created_by=record.created_by,
            created_at=record.created_at,
            updated_at=record.updated_at,
            space_id=record.space_id,
            required_tier_id=record.required_tier_id,
            icon=record.icon,
            position=record.position,
            deleted_at=record.deleted_at,
        )

    def _to_data(self, channel: Channel) -> Dict[str, Any]:
        return {
            "community_id": channel.community_id,
            "space_id": channel.space_id,
            "name": channel.name,
            "description": channel.description,
            "permission": channel.permission.value,
            "required_tier_id": channel.required_tier_id,
            "icon": channel.icon,
            "position": channel.position,
            "created_by": channel.created_by,
            "created_at": channel.created_at,
            "updated_at": channel.updated_at,
            "deleted_at": channel.deleted_at,
        }

    async def create(self, channel: Channel) -> Channel:
        record = await self._prisma.channel.create(
            data={"id": channel.id, **self._to_data(channel)}
        )
        return self._to_entity(record)

    async def find_by_id(self, channel_id: str) -> Optional[Channel]:
        record = await self._prisma.channel.find_unique(where={"id": channel_id})
        return self._to_entity(record) if record else None

    async def find_by_space_id(self, space_id: str) -> list[Channel]:
        records = await self._prisma.channel.find_many(
            where={"space_id": space_id, "deleted_at": None},
            order=[{"position": "asc"}, {"created_at": "asc"}],
        )
        return [self._to_entity(r) for r in records]

    async def find_standalone(self, community_id: str) -> list[Channel]:
        records = await self._prisma.channel.find_many(
            where={"community_id": community_id, "space_id": None, "deleted_at": None},
            order=[{"position": "asc"}, {"created_at": "asc"}],
        )
        return [self._to_entity(r) for r in records]

    async def update(self, channel: Channel) -> Channel:
        record = await self._prisma.channel.update(
            where={"id": channel.id},
            data=self._to_data(channel),
        )
        return self._to_entity(record) if record else channel

    async def delete(self, channel_id: str) -> None:
        await self._prisma.channel.update_many(
            where={"id": channel_id, "deleted_at": None},
            data=archived_now(),
        )
