"""
ReportLab certificate renderer.

Writes {CERTIFICATE_DIR}/{certificate_id}.pdf (A4 landscape) and returns the
public download URL served by the certificates router.
"""

import asyncio
import logging
from pathlib import Path

from reportlab.lib.colors import Color
from reportlab.lib.pagesizes import A4, landscape
from reportlab.lib.units import mm
from reportlab.pdfgen import canvas

from community_os.config.settings import Config
from community_os.domain.entities import Certificate
from community_os.domain.ports.services import CertificateRenderer, CertificateRenderingError

logger = logging.getLogger(__name__)

PAGE_SIZE = landscape(A4)
ACCENT = Color(0.0, 0.4, 0.8)
MUTED = Color(0.35, 0.35, 0.35)


class ReportLabCertificateRenderer(CertificateRenderer):
    def __init__(
        self,
        output_dir: str = Config.CERTIFICATE_DIR,
        public_base_url: str = Config.PUBLIC_BASE_URL,
    ):
        self._output_dir = Path(output_dir)
        self._public_base_url = public_base_url.rstrip("/")

    def path_for(self, certificate_id: str) -> Path:
        return self._output_dir / f"{certificate_id}.pdf"

    def url_for(self, certificate_id: str) -> str:
        return f"{self._public_base_url}/api/certificates/{certificate_id}/pdf"

    async def render(self, certificate: Certificate) -> str:
        path = self.path_for(certificate.id)
        try:
            await asyncio.to_thread(self._draw, certificate, path)
        except (OSError, ValueError) as e:
            logger.error(f"[CERTIFICATE] Failed to render {certificate.id}: {e}")
            raise CertificateRenderingError(str(e)) from e
        logger.info(f"[CERTIFICATE] Rendered {certificate.id} to {path}")
        return self.url_for(certificate.id)

    def _draw(self, certificate: Certificate, path: Path) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        width, height = PAGE_SIZE
        c = canvas.Canvas(str(path), pagesize=PAGE_SIZE)
        c.setTitle(f"Certificate of Completion - {certificate.course_name}")

        # Border
        c.setStrokeColor(ACCENT)
        c.setLineWidth(3)
        c.rect(12 * mm, 12 * mm, width - 24 * mm, height - 24 * mm)

        c.setFillColor(ACCENT)
        c.setFont("Helvetica-Bold", 34)
        c.drawCentredString(width / 2, height - 55 * mm, "Certificate of Completion")

        c.setFillColor(MUTED)
        c.setFont("Helvetica", 14)
        c.drawCentredString(width / 2, height - 75 * mm, "This certifies that")

        c.setFillColor(Color(0, 0, 0))
        c.setFont("Helvetica-Bold", 28)
        c.drawCentredString(width / 2, height - 95 * mm, certificate.user_name)

        c.setFillColor(MUTED)
        c.setFont("Helvetica", 14)
        c.drawCentredString(width / 2, height - 112 * mm, "has successfully completed")

        c.setFillColor(Color(0, 0, 0))
        c.setFont("Helvetica-Bold", 20)
        c.drawCentredString(width / 2, height - 128 * mm, certificate.course_name)

        c.setFont("Helvetica", 12)
        c.drawString(30 * mm, 35 * mm, f"Instructor: {certificate.instructor_name}")
        c.drawString(
            30 * mm, 28 * mm, f"Issued: {certificate.issued_at.strftime('%B %d, %Y')}"
        )
        c.drawRightString(
            width - 30 * mm, 28 * mm, f"Verification code: {certificate.verification_code}"
        )

        c.showPage()
        c.save()
