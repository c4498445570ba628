"""
Certificate Entity - Proof of course completion with a public verification code.
"""

import re
import secrets
import string
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional
from uuid import uuid4

from community_os.domain.exceptions import DomainValidationError
from community_os.domain.value_objects import is_web_url

VERIFICATION_CODE_PATTERN = re.compile(r"^CERT-[A-Z0-9]{8}$")
_CODE_ALPHABET = string.ascii_uppercase + string.digits


def generate_verification_code() -> str:
    return "CERT-" + "".join(secrets.choice(_CODE_ALPHABET) for _ in range(8))


@dataclass
class Certificate:
    id: str
    course_id: str
    user_id: str
    user_name: str
    course_name: str
    instructor_name: str
    issued_at: datetime
    verification_code: str
    pdf_url: Optional[str] = None

    def __post_init__(self):
        for label, value in (
            ("User name", self.user_name),
            ("Course name", self.course_name),
            ("Instructor name", self.instructor_name),
        ):
            if not value or not value.strip():
                raise DomainValidationError(f"{label} cannot be empty", field="name")
        if not VERIFICATION_CODE_PATTERN.match(self.verification_code or ""):
            raise DomainValidationError(
                "Verification code must look like CERT-XXXXXXXX", field="verification_code"
            )

    @classmethod
    def create(
        cls,
        course_id: str,
        user_id: str,
        user_name: str,
        course_name: str,
        instructor_name: str,
        verification_code: Optional[str] = None,
    ) -> "Certificate":
        return cls(
            id=str(uuid4()),
            course_id=course_id,
            user_id=user_id,
            user_name=user_name,
            course_name=course_name,
            instructor_name=instructor_name,
            issued_at=datetime.now(timezone.utc),
            verification_code=verification_code or generate_verification_code(),
        )

    def set_pdf_url(self, url: str) -> None:
        if self.pdf_url is not None:
            raise DomainValidationError("Certificate PDF URL is already set", field="pdf_url")
        if not url or not is_web_url(url):
            raise DomainValidationError("PDF URL must be a valid URL", field="pdf_url")
        self.pdf_url = url
