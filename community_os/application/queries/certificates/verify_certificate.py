"""
Verify Certificate Query - public lookup by verification code.

A well-formed but unknown code is not an error: it reports is_valid=False.
"""

from dataclasses import dataclass

from community_os.application.common.errors import translate_errors
from community_os.application.common.interfaces import Query, QueryHandler
from community_os.application.dto import CertificateVerificationDto
from community_os.application.errors import CertificateError, CertificateErrorCode
from community_os.application.mappers import to_certificate_dto
from community_os.domain.entities.certificate import VERIFICATION_CODE_PATTERN
from community_os.domain.ports.repositories import CertificateRepository


@dataclass(frozen=True)
class VerifyCertificateQuery(Query[CertificateVerificationDto]):
    verification_code: str


class VerifyCertificateHandler(QueryHandler[CertificateVerificationDto]):
    def __init__(self, certificate_repository: CertificateRepository):
        self._certificate_repository = certificate_repository

    @translate_errors(CertificateError)
    async def execute(self, query: VerifyCertificateQuery) -> CertificateVerificationDto:
        code = (query.verification_code or "").strip().upper()
        if not code:
            raise CertificateError(
                CertificateErrorCode.INVALID_INPUT, "Verification code is required"
            )
        if not VERIFICATION_CODE_PATTERN.match(code):
            raise CertificateError(CertificateErrorCode.INVALID_VERIFICATION_CODE)

        certificate = await self._certificate_repository.find_by_verification_code(code)
        if certificate is None:
            return CertificateVerificationDto(is_valid=False, certificate=None)
        return CertificateVerificationDto(
            is_valid=True, certificate=to_certificate_dto(certificate)
        )
