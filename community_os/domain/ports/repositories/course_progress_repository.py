"""
Course Progress Repository Port - One progress record per (user, course).
"""

from abc import ABC, abstractmethod
from typing import Optional
from community_os.domain.entities.course_progress import CourseProgress


class CourseProgressRepository(ABC):
    @abstractmethod
    async def create(self, progress: CourseProgress) -> CourseProgress: ...

    @abstractmethod
    async def find_by_id(self, progress_id: str) -> Optional[CourseProgress]: ...

    @abstractmethod
    async def find_by_user_and_course(
        self, user_id: str, course_id: str
    ) -> Optional[CourseProgress]: ...

    @abstractmethod
    async def count_by_course_id(self, course_id: str) -> int: ...

    @abstractmethod
    async def update(self, progress: CourseProgress) -> CourseProgress: ...
