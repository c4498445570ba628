"""Lesson commands."""

from .create_lesson import CreateLessonCommand, CreateLessonHandler
from .update_lesson import UpdateLessonCommand, UpdateLessonHandler
from .reorder_lesson import ReorderLessonCommand, ReorderLessonHandler
from .set_drip_schedule import SetDripScheduleCommand, SetDripScheduleHandler
from .archive_lesson import ArchiveLessonCommand, ArchiveLessonHandler

__all__ = [
    "CreateLessonCommand",
    "CreateLessonHandler",
    "UpdateLessonCommand",
    "UpdateLessonHandler",
    "ReorderLessonCommand",
    "ReorderLessonHandler",
    "SetDripScheduleCommand",
    "SetDripScheduleHandler",
    "ArchiveLessonCommand",
    "ArchiveLessonHandler",
]
