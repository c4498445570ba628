from dataclasses import dataclass

from community_os.application.common.errors import translate_errors
from community_os.application.common.interfaces import Query, QueryHandler
from community_os.application.dto import CertificateDto
from community_os.application.errors import CertificateError, CertificateErrorCode
from community_os.application.mappers import to_certificate_dto
from community_os.domain.ports.repositories import CertificateRepository


@dataclass(frozen=True)
class GetCertificateQuery(Query[CertificateDto]):
    certificate_id: str


class GetCertificateHandler(QueryHandler[CertificateDto]):
    def __init__(self, certificate_repository: CertificateRepository):
        self._certificate_repository = certificate_repository

    @translate_errors(CertificateError)
    async def execute(self, query: GetCertificateQuery) -> CertificateDto:
        if not query.certificate_id or not query.certificate_id.strip():
            raise CertificateError(CertificateErrorCode.INVALID_INPUT, "Certificate ID is required")
        certificate = await self._certificate_repository.find_by_id(query.certificate_id)
        if certificate is None:
            raise CertificateError(CertificateErrorCode.CERTIFICATE_NOT_FOUND)
        return to_certificate_dto(certificate)
