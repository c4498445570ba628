"""Certificates API Router."""

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import FileResponse
from dishka.integrations.fastapi import FromDishka, inject

from community_os.application.commands.certificates import (
    GenerateCertificateCommand,
    GenerateCertificateHandler,
)
from community_os.application.dto.course import CertificateDto, CertificateVerificationDto
from community_os.application.queries.certificates import (
    GetCertificateHandler,
    GetCertificateQuery,
    ListCertificatesHandler,
    ListCertificatesQuery,
    VerifyCertificateHandler,
    VerifyCertificateQuery,
)
from community_os.domain.ports.services.certificate_renderer import CertificateRenderer
from community_os.presentation.dependencies.auth import AuthUser, get_current_user

router = APIRouter(prefix="/api", tags=["certificates"])


@router.post(
    "/courses/{course_id}/certificate",
    response_model=CertificateDto,
    status_code=status.HTTP_201_CREATED,
)
@inject
async def generate_certificate(
    course_id: str,
    handler: FromDishka[GenerateCertificateHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    """Issue the caller's certificate for a completed course."""
    command = GenerateCertificateCommand(user_id=current_user.user_id, course_id=course_id)
    return await handler.execute(command)


@router.get("/certificates", response_model=list[CertificateDto])
@inject
async def list_certificates(
    handler: FromDishka[ListCertificatesHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    return await handler.execute(ListCertificatesQuery(user_id=current_user.user_id))


@router.get("/certificates/verify/{verification_code}", response_model=CertificateVerificationDto)
@inject
async def verify_certificate(verification_code: str, handler: FromDishka[VerifyCertificateHandler]):
    """Unknown codes answer isValid=false rather than 404."""
    query = VerifyCertificateQuery(verification_code=verification_code)
    return await handler.execute(query)


@router.get("/certificates/{certificate_id}", response_model=CertificateDto)
@inject
async def get_certificate(certificate_id: str, handler: FromDishka[GetCertificateHandler]):
    return await handler.execute(GetCertificateQuery(certificate_id=certificate_id))


@router.get("/certificates/{certificate_id}/pdf", response_class=FileResponse)
@inject
async def download_certificate(
    certificate_id: str,
    handler: FromDishka[GetCertificateHandler],
    renderer: FromDishka[CertificateRenderer],
):
    certificate = await handler.execute(GetCertificateQuery(certificate_id=certificate_id))
    path = renderer.path_for(certificate.id)
    if not path.is_file():
        raise HTTPException(status_code=404, detail="Certificate PDF not found")
    return FileResponse(
        path,
        media_type="application/pdf",
        filename=f"certificate-{certificate.verification_code}.pdf",
    )
