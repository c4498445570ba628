"""Course commands."""

from .create_course import CreateCourseCommand, CreateCourseHandler
from .update_course import UpdateCourseCommand, UpdateCourseHandler
from .publish_course import PublishCourseCommand, PublishCourseHandler
from .archive_course import ArchiveCourseCommand, ArchiveCourseHandler

__all__ = [
    "CreateCourseCommand",
    "CreateCourseHandler",
    "UpdateCourseCommand",
    "UpdateCourseHandler",
    "PublishCourseCommand",
    "PublishCourseHandler",
    "ArchiveCourseCommand",
    "ArchiveCourseHandler",
]
