"""
Application errors.

Every feature owns a closed error-code enum and an ApplicationError subclass
bound to it. Use cases only ever raise their own feature error:

    class PostErrorCode(str, Enum):
        POST_NOT_FOUND = "POST_NOT_FOUND"
        INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"

    class PostError(ApplicationError):
        feature = "posts"
        codes = PostErrorCode
        field_codes = {"title": PostErrorCode.INVALID_TITLE}

The presentation layer renders them as {"error": code, "message": text}
with the HTTP status from status_code.
"""

import logging
from enum import Enum
from functools import wraps
from typing import Optional

from community_os.domain.exceptions import DomainValidationError

logger = logging.getLogger(__name__)

FORBIDDEN_CODES = frozenset({"UNAUTHORIZED", "NOT_COURSE_INSTRUCTOR", "NOT_OWNED_BY_USER"})
SERVER_CODES = frozenset(
    {"INTERNAL_SERVER_ERROR", "SEARCH_FAILED", "STRIPE_ERROR", "CHECKOUT_FAILED"}
)
CONFLICT_MARKERS = ("ALREADY_", "CANNOT_", "SAME_", "_EXISTS", "_REACHED")


def status_for_code(code: str, extra_conflicts: frozenset = frozenset()) -> int:
    """HTTP status for an error code, derived from its category."""
    if code in SERVER_CODES:
        return 500
    if code in FORBIDDEN_CODES:
        return 403
    if code.endswith("NOT_FOUND"):
        return 404
    if code in extra_conflicts or any(marker in code for marker in CONFLICT_MARKERS):
        return 409
    return 400


class ApplicationError(Exception):
    feature: str = "application"
    codes: type[Enum]
    # DomainValidationError.field -> error code
    field_codes: dict = {}
    conflict_codes: frozenset = frozenset()

    def __init__(self, code: Enum, message: Optional[str] = None):
        self.code = code
        self.message = message or code.value.replace("_", " ").capitalize()
        super().__init__(self.message)

    @property
    def status_code(self) -> int:
        return status_for_code(self.code.value, self.conflict_codes)

    @classmethod
    def from_domain(cls, exc: DomainValidationError, overrides: Optional[dict] = None):
        """Translate an entity rule violation into this feature's code."""
        mapping = {**cls.field_codes, **(overrides or {})}
        fallback = cls.codes.__members__.get("INVALID_INPUT", cls.codes["INTERNAL_SERVER_ERROR"])
        code = mapping.get(exc.field, fallback)
        return cls(code, exc.message)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.code.value!r}, {self.message!r})"


def translate_errors(error_cls: type[ApplicationError]):
    """
    Decorator for execute(): re-raise the feature's own errors, collapse
    everything else into INTERNAL_SERVER_ERROR after logging it.
    """

    def decorator(func):
        @wraps(func)
        async def wrapper(*args, **kwargs):
            try:
                return await func(*args, **kwargs)
            except error_cls:
                raise
            except DomainValidationError as exc:
                raise error_cls.from_domain(exc) from exc
            except Exception as exc:
                logger.exception(f"[{error_cls.feature}] Unexpected error in {func.__qualname__}")
                raise error_cls(
                    error_cls.codes["INTERNAL_SERVER_ERROR"], "An unexpected error occurred"
                ) from exc

        return wrapper

    return decorator
