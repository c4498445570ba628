from community_os.infrastructure.pdf.certificate_renderer import ReportLabCertificateRenderer

__all__ = ["ReportLabCertificateRenderer"]
