from community_os.application.errors import CourseError, CourseErrorCode
from community_os.domain.entities import Course
from community_os.domain.ports.repositories import CourseRepository


async def load_course_for_instructor(
    course_repository: CourseRepository, course_id: str, requester_id: str
) -> Course:
    """Fetch a live course the requester is allowed to change."""
    if not course_id or not course_id.strip():
        raise CourseError(CourseErrorCode.INVALID_INPUT, "Course ID is required")
    if not requester_id or not requester_id.strip():
        raise CourseError(CourseErrorCode.UNAUTHORIZED, "Requester is required")

    course = await course_repository.find_by_id(course_id)
    if course is None:
        raise CourseError(CourseErrorCode.COURSE_NOT_FOUND)
    if not course.is_instructor(requester_id):
        raise CourseError(
            CourseErrorCode.UNAUTHORIZED, "Only the course instructor can modify this course"
        )
    return course
