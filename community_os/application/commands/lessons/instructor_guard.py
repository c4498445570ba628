from community_os.application.errors import LessonError, LessonErrorCode
from community_os.domain.entities import Course, Lesson
from community_os.domain.ports.repositories import CourseRepository, LessonRepository


async def load_course_as_instructor(
    course_repository: CourseRepository, course_id: str, requester_id: str
) -> Course:
    if not course_id or not course_id.strip():
        raise LessonError(LessonErrorCode.INVALID_INPUT, "Course ID is required")
    if not requester_id or not requester_id.strip():
        raise LessonError(LessonErrorCode.UNAUTHORIZED, "Requester is required")

    course = await course_repository.find_by_id(course_id)
    if course is None:
        raise LessonError(LessonErrorCode.COURSE_NOT_FOUND)
    if not course.is_instructor(requester_id):
        raise LessonError(
            LessonErrorCode.NOT_COURSE_INSTRUCTOR, "Only the course instructor can manage lessons"
        )
    return course


async def load_lesson_as_instructor(
    lesson_repository: LessonRepository,
    course_repository: CourseRepository,
    lesson_id: str,
    requester_id: str,
) -> Lesson:
    """Fetch a lesson whose course is taught by the requester."""
    if not lesson_id or not lesson_id.strip():
        raise LessonError(LessonErrorCode.INVALID_INPUT, "Lesson ID is required")

    lesson = await lesson_repository.find_by_id(lesson_id)
    if lesson is None:
        raise LessonError(LessonErrorCode.LESSON_NOT_FOUND)
    await load_course_as_instructor(course_repository, lesson.course_id, requester_id)
    if lesson.is_archived:
        raise LessonError(LessonErrorCode.CANNOT_MODIFY_ARCHIVED_LESSON)
    return lesson
