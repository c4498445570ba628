"""Memory repositories for communities and their structure."""

from typing import Optional

from community_os.domain.entities import Channel, Community, Space, User
from community_os.domain.ports.repositories import (
    MEMBER_SORT_COLUMNS,
    ChannelRepository,
    CommunityRepository,
    SpaceRepository,
    UserRepository,
)
from community_os.infrastructure.persistence.memory.store import (
    InMemoryStore,
    MemoryTable,
    live,
    soft_delete,
)


class MemoryCommunityRepository(CommunityRepository):
    def __init__(self, store: InMemoryStore):
        self._table: MemoryTable[Community] = MemoryTable(store.communities)

    async def create(self, community: Community) -> Community:
        return self._table.insert(community)

    async def find_by_id(self, community_id: str) -> Optional[Community]:
        return self._table.get(community_id)

    async def find_all(self) -> list[Community]:
        communities = self._table.where(live)
        return sorted(communities, key=lambda c: c.created_at)

    async def update(self, community: Community) -> Community:
        return self._table.replace(community)

    async def delete(self, community_id: str) -> None:
        soft_delete(self._table, community_id)


class MemoryUserRepository(UserRepository):
    def __init__(self, store: InMemoryStore):
        self._table: MemoryTable[User] = MemoryTable(store.users)

    async def create(self, user: User) -> User:
        return self._table.insert(user)

    async def find_by_id(self, user_id: str) -> Optional[User]:
        return self._table.get(user_id)

    async def find_by_email(self, email: str) -> Optional[User]:
        normalized = email.strip().lower()
        return self._table.first(lambda u: u.email.value == normalized)

    async def find_by_community_id(self, community_id: str) -> list[User]:
        users = self._table.where(lambda u: u.community_id == community_id and live(u))
        return sorted(users, key=lambda u: u.created_at)

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
        users = await self.find_by_community_id(community_id)
        if sort_column == "name":
            users.sort(key=lambda u: (u.name or "").lower(), reverse=descending)
        else:
            users.sort(key=lambda u: getattr(u, sort_column), reverse=descending)
        return users[offset : offset + limit]

    async def count_by_community_id(self, community_id: str) -> int:
        return self._table.count(lambda u: u.community_id == community_id and live(u))

    async def find_by_name_prefix(
        self, community_id: str, prefix: str, limit: int
    ) -> list[User]:
        needle = prefix.lower()
        users = self._table.where(
            lambda u: u.community_id == community_id
            and live(u)
            and any(word.lower().startswith(needle) for word in (u.name or "").split())
        )
        users.sort(key=lambda u: (u.name or "").lower())
        return users[:limit]

    async def update(self, user: User) -> User:
        return self._table.replace(user)

    async def delete(self, user_id: str) -> None:
        soft_delete(self._table, user_id)


class MemorySpaceRepository(SpaceRepository):
    def __init__(self, store: InMemoryStore):
        self._table: MemoryTable[Space] = MemoryTable(store.spaces)

    async def create(self, space: Space) -> Space:
        return self._table.insert(space)

    async def find_by_id(self, space_id: str) -> Optional[Space]:
        return self._table.get(space_id)

    async def find_root_spaces(self, community_id: str) -> list[Space]:
        spaces = self._table.where(
            lambda s: s.community_id == community_id and s.parent_space_id is None and live(s)
        )
        return sorted(spaces, key=lambda s: (s.position, s.created_at))

    async def find_children(self, parent_space_id: str) -> list[Space]:
        spaces = self._table.where(lambda s: s.parent_space_id == parent_space_id and live(s))
        return sorted(spaces, key=lambda s: (s.position, s.created_at))

    async def update(self, space: Space) -> Space:
        return self._table.replace(space)

    async def delete(self, space_id: str) -> None:
        soft_delete(self._table, space_id)


class MemoryChannelRepository(ChannelRepository):
    def __init__(self, store: InMemoryStore):
        self._table: MemoryTable[Channel] = MemoryTable(store.channels)

    async def create(self, channel: Channel) -> Channel:
        return self._table.insert(channel)

    async def find_by_id(self, channel_id: str) -> Optional[Channel]:
        return self._table.get(channel_id)

    async def find_by_space_id(self, space_id: str) -> list[Channel]:
        channels = self._table.where(lambda c: c.space_id == space_id and live(c))
        return sorted(channels, key=lambda c: (c.position, c.created_at))

    async def find_standalone(self, community_id: str) -> list[Channel]:
        channels = self._table.where(
            lambda c: c.community_id == community_id and c.space_id is None and live(c)
        )
        return sorted(channels, key=lambda c: (c.position, c.created_at))

    async def update(self, channel: Channel) -> Channel:
        return self._table.replace(channel)

    async def delete(self, channel_id: str) -> None:
        soft_delete(self._table, channel_id)
