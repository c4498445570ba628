"""
Generate Certificate Command.

Issued once per (user, course) after the course is completed. The PDF is
rendered before anything is stored, so a renderer failure leaves no
half-issued certificate behind.
"""

import logging
from dataclasses import dataclass

from community_os.application.common.errors import translate_errors
from community_os.application.common.interfaces import Command, CommandHandler
from community_os.application.dto import CertificateDto
from community_os.application.errors import CertificateError, CertificateErrorCode
from community_os.application.mappers import to_certificate_dto
from community_os.domain.entities import Certificate
from community_os.domain.ports.repositories import (
    CertificateRepository,
    CourseProgressRepository,
    CourseRepository,
    UserRepository,
)
from community_os.domain.ports.services import CertificateRenderer, CertificateRenderingError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GenerateCertificateCommand(Command[CertificateDto]):
    user_id: str
    course_id: str


class GenerateCertificateHandler(CommandHandler[CertificateDto]):
    def __init__(
        self,
        certificate_repository: CertificateRepository,
        course_repository: CourseRepository,
        user_repository: UserRepository,
        progress_repository: CourseProgressRepository,
        renderer: CertificateRenderer,
    ):
        self._certificate_repository = certificate_repository
        self._course_repository = course_repository
        self._user_repository = user_repository
        self._progress_repository = progress_repository
        self._renderer = renderer

    @translate_errors(CertificateError)
    async def execute(self, command: GenerateCertificateCommand) -> CertificateDto:
        if not command.user_id or not command.course_id:
            raise CertificateError(
                CertificateErrorCode.INVALID_INPUT, "User ID and course ID are required"
            )

        course = await self._course_repository.find_by_id(command.course_id)
        if course is None:
            raise CertificateError(CertificateErrorCode.COURSE_NOT_FOUND)
        user = await self._user_repository.find_by_id(command.user_id)
        if user is None:
            raise CertificateError(CertificateErrorCode.USER_NOT_FOUND)

        progress = await self._progress_repository.find_by_user_and_course(
            command.user_id, command.course_id
        )
        if progress is None or not progress.is_complete:
            raise CertificateError(CertificateErrorCode.COURSE_NOT_COMPLETED)

        existing = await self._certificate_repository.find_by_user_and_course(
            command.user_id, command.course_id
        )
        if existing is not None:
            raise CertificateError(CertificateErrorCode.CERTIFICATE_ALREADY_EXISTS)

        instructor = await self._user_repository.find_by_id(course.instructor_id)
        certificate = Certificate.create(
            course_id=course.id,
            user_id=user.id,
            user_name=user.display_name,
            course_name=course.title,
            instructor_name=instructor.display_name if instructor else "Unknown",
        )

        try:
            pdf_url = await self._renderer.render(certificate)
        except CertificateRenderingError as exc:
            logger.error(f"[CERTIFICATES] PDF rendering failed for {certificate.id}: {exc}")
            raise CertificateError(
                CertificateErrorCode.PDF_GENERATION_FAILED, "Certificate PDF could not be generated"
            ) from exc
        certificate.set_pdf_url(pdf_url)

        created = await self._certificate_repository.create(certificate)
        logger.info(
            f"[CERTIFICATES] Issued {created.verification_code} to user {user.id} for course {course.id}"
        )
        return to_certificate_dto(created)
