from enum import Enum

from community_os.application.common.errors import ApplicationError


class CertificateErrorCode(str, Enum):
    INVALID_INPUT = "INVALID_INPUT"
    INVALID_VERIFICATION_CODE = "INVALID_VERIFICATION_CODE"
    CERTIFICATE_NOT_FOUND = "CERTIFICATE_NOT_FOUND"
    COURSE_NOT_FOUND = "COURSE_NOT_FOUND"
    USER_NOT_FOUND = "USER_NOT_FOUND"
    CERTIFICATE_ALREADY_EXISTS = "CERTIFICATE_ALREADY_EXISTS"
    COURSE_NOT_COMPLETED = "COURSE_NOT_COMPLETED"
    PDF_GENERATION_FAILED = "PDF_GENERATION_FAILED"
    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"


class CertificateError(ApplicationError):
    feature = "certificates"
    codes = CertificateErrorCode
    field_codes = {
        "verification_code": CertificateErrorCode.INVALID_VERIFICATION_CODE,
        "pdf_url": CertificateErrorCode.PDF_GENERATION_FAILED,
    }
    conflict_codes = frozenset({"PDF_GENERATION_FAILED", "COURSE_NOT_COMPLETED"})
