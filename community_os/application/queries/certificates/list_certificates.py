from dataclasses import dataclass

from community_os.application.common.errors import translate_errors
from community_os.application.common.interfaces import Query, QueryHandler
from community_os.application.dto import CertificateDto
from community_os.application.errors import CertificateError, CertificateErrorCode
from community_os.application.mappers import to_certificate_dto
from community_os.domain.ports.repositories import CertificateRepository


@dataclass(frozen=True)
class ListCertificatesQuery(Query[list[CertificateDto]]):
    user_id: str


class ListCertificatesHandler(QueryHandler[list[CertificateDto]]):
    def __init__(self, certificate_repository: CertificateRepository):
        self._certificate_repository = certificate_repository

    @translate_errors(CertificateError)
    async def execute(self, query: ListCertificatesQuery) -> list[CertificateDto]:
        if not query.user_id or not query.user_id.strip():
            raise CertificateError(CertificateErrorCode.INVALID_INPUT, "User ID is required")
        certificates = await self._certificate_repository.find_by_user_id(query.user_id)
        return [to_certificate_dto(certificate) for certificate in certificates]
