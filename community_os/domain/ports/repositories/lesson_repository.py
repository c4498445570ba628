"""
Lesson Repository Port - Interface for lesson persistence.
"""

from abc import ABC, abstractmethod
from typing import Optional
from community_os.domain.entities.lesson import Lesson


class LessonRepository(ABC):
    @abstractmethod
    async def create(self, lesson: Lesson) -> Lesson: ...

    @abstractmethod
    async def find_by_id(self, lesson_id: str) -> Optional[Lesson]: ...

    @abstractmethod
    async def find_by_course_id(self, course_id: str) -> list[Lesson]:
        """Non-archived lessons ordered by their order field."""
        ...

    @abstractmethod
    async def count_by_course_id(self, course_id: str) -> int: ...

    @abstractmethod
    async def update(self, lesson: Lesson) -> Lesson: ...

    @abstractmethod
    async def delete(self, lesson_id: str) -> None: ...
