"""Assembles a CourseDto with its instructor name and counters."""

from community_os.application.dto import CourseDto
from community_os.application.mappers import to_course_dto
from community_os.domain.entities import Course
from community_os.domain.ports.repositories import (
    CourseProgressRepository,
    LessonRepository,
    UserRepository,
)

UNKNOWN_INSTRUCTOR = "Unknown"


async def course_details(
    course: Course,
    user_repository: UserRepository,
    lesson_repository: LessonRepository,
    progress_repository: CourseProgressRepository,
) -> CourseDto:
    instructor = await user_repository.find_by_id(course.instructor_id)
    instructor_name = (instructor.name if instructor and instructor.name else None) or UNKNOWN_INSTRUCTOR
    lesson_count = await lesson_repository.count_by_course_id(course.id)
    enrolled_count = await progress_repository.count_by_course_id(course.id)
    return to_course_dto(course, instructor_name, lesson_count, enrolled_count)
