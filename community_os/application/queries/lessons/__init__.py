"""Lesson queries."""

from .get_lesson import GetLessonQuery, GetLessonHandler
from .list_lessons import ListLessonsQuery, ListLessonsHandler

__all__ = [
    "GetLessonQuery",
    "GetLessonHandler",
    "ListLessonsQuery",
    "ListLessonsHandler",
]
