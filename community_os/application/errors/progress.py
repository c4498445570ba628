from enum import Enum

from community_os.application.common.errors import ApplicationError


class ProgressErrorCode(str, Enum):
    INVALID_INPUT = "INVALID_INPUT"
    INVALID_LESSON_ID = "INVALID_LESSON_ID"
    PROGRESS_NOT_FOUND = "PROGRESS_NOT_FOUND"
    COURSE_NOT_FOUND = "COURSE_NOT_FOUND"
    USER_NOT_FOUND = "USER_NOT_FOUND"
    LESSON_NOT_FOUND = "LESSON_NOT_FOUND"
    LESSON_ALREADY_COMPLETED = "LESSON_ALREADY_COMPLETED"
    LESSON_NOT_AVAILABLE = "LESSON_NOT_AVAILABLE"
    COURSE_ALREADY_COMPLETED = "COURSE_ALREADY_COMPLETED"
    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"


class ProgressError(ApplicationError):
    feature = "progress"
    codes = ProgressErrorCode
    field_codes = {
        "lesson_id": ProgressErrorCode.INVALID_LESSON_ID,
        "already_completed": ProgressErrorCode.LESSON_ALREADY_COMPLETED,
        "course_completed": ProgressErrorCode.COURSE_ALREADY_COMPLETED,
    }
    conflict_codes = frozenset({"LESSON_NOT_AVAILABLE"})
