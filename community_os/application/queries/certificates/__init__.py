"""Certificate queries."""

from .get_certificate import GetCertificateQuery, GetCertificateHandler
from .list_certificates import ListCertificatesQuery, ListCertificatesHandler
from .verify_certificate import VerifyCertificateQuery, VerifyCertificateHandler

__all__ = [
    "GetCertificateQuery",
    "GetCertificateHandler",
    "ListCertificatesQuery",
    "ListCertificatesHandler",
    "VerifyCertificateQuery",
    "VerifyCertificateHandler",
]
