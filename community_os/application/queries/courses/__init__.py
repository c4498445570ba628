"""Course queries."""

from .course_details import course_details
from .get_course import GetCourseQuery, GetCourseHandler
from .list_courses import ListCoursesQuery, ListCoursesHandler

__all__ = [
    "course_details",
    "GetCourseQuery",
    "GetCourseHandler",
    "ListCoursesQuery",
    "ListCoursesHandler",
]
