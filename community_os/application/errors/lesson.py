from enum import Enum

from community_os.application.common.errors import ApplicationError


class LessonErrorCode(str, Enum):
    INVALID_INPUT = "INVALID_INPUT"
    INVALID_TITLE = "INVALID_TITLE"
    INVALID_CONTENT = "INVALID_CONTENT"
    INVALID_TYPE = "INVALID_TYPE"
    INVALID_ORDER = "INVALID_ORDER"
    INVALID_DRIP_DATE = "INVALID_DRIP_DATE"
    TITLE_TOO_SHORT = "TITLE_TOO_SHORT"
    TITLE_TOO_LONG = "TITLE_TOO_LONG"
    CONTENT_TOO_SHORT = "CONTENT_TOO_SHORT"
    MISSING_VIDEO_URL = "MISSING_VIDEO_URL"
    MISSING_PDF_URL = "MISSING_PDF_URL"
    LESSON_NOT_FOUND = "LESSON_NOT_FOUND"
    COURSE_NOT_FOUND = "COURSE_NOT_FOUND"
    LESSON_ALREADY_ARCHIVED = "LESSON_ALREADY_ARCHIVED"
    CANNOT_MODIFY_ARCHIVED_LESSON = "CANNOT_MODIFY_ARCHIVED_LESSON"
    LESSON_NOT_AVAILABLE = "LESSON_NOT_AVAILABLE"
    DRIP_DATE_IN_PAST = "DRIP_DATE_IN_PAST"
    UNAUTHORIZED = "UNAUTHORIZED"
    NOT_COURSE_INSTRUCTOR = "NOT_COURSE_INSTRUCTOR"
    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"


class LessonError(ApplicationError):
    feature = "lessons"
    codes = LessonErrorCode
    field_codes = {
        "title": LessonErrorCode.INVALID_TITLE,
        "title_too_short": LessonErrorCode.TITLE_TOO_SHORT,
        "title_too_long": LessonErrorCode.TITLE_TOO_LONG,
        "content": LessonErrorCode.INVALID_CONTENT,
        "type": LessonErrorCode.INVALID_TYPE,
        "order": LessonErrorCode.INVALID_ORDER,
        "video_url": LessonErrorCode.MISSING_VIDEO_URL,
        "pdf_url": LessonErrorCode.MISSING_PDF_URL,
        "archived": LessonErrorCode.CANNOT_MODIFY_ARCHIVED_LESSON,
    }
