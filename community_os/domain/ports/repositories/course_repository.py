"""
Course Repository Port - Interface for course persistence.
"""

from abc import ABC, abstractmethod
from typing import Optional
from community_os.domain.entities.course import Course


class CourseRepository(ABC):
    @abstractmethod
    async def create(self, course: Course) -> Course: ...

    @abstractmethod
    async def find_by_id(self, course_id: str) -> Optional[Course]: ...

    @abstractmethod
    async def find_by_community_id(
        self, community_id: str, published_only: bool = False
    ) -> list[Course]: ...

    @abstractmethod
    async def update(self, course: Course) -> Course: ...

    @abstractmethod
    async def delete(self, course_id: str) -> None: ...
