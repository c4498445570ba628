from enum import Enum

from community_os.application.common.errors import ApplicationError


class CourseErrorCode(str, Enum):
    INVALID_INPUT = "INVALID_INPUT"
    INVALID_TITLE = "INVALID_TITLE"
    INVALID_DESCRIPTION = "INVALID_DESCRIPTION"
    COURSE_NOT_FOUND = "COURSE_NOT_FOUND"
    COMMUNITY_NOT_FOUND = "COMMUNITY_NOT_FOUND"
    INSTRUCTOR_NOT_FOUND = "INSTRUCTOR_NOT_FOUND"
    COURSE_ALREADY_PUBLISHED = "COURSE_ALREADY_PUBLISHED"
    COURSE_ALREADY_ARCHIVED = "COURSE_ALREADY_ARCHIVED"
    CANNOT_ARCHIVE_PUBLISHED_COURSE = "CANNOT_ARCHIVE_PUBLISHED_COURSE"
    CANNOT_MODIFY_ARCHIVED_COURSE = "CANNOT_MODIFY_ARCHIVED_COURSE"
    UNAUTHORIZED = "UNAUTHORIZED"
    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"


class CourseError(ApplicationError):
    feature = "courses"
    codes = CourseErrorCode
    field_codes = {
        "title": CourseErrorCode.INVALID_TITLE,
        "description": CourseErrorCode.INVALID_DESCRIPTION,
        "published": CourseErrorCode.COURSE_ALREADY_PUBLISHED,
        "archived": CourseErrorCode.CANNOT_MODIFY_ARCHIVED_COURSE,
    }
