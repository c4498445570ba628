"""Certificate commands."""

from .generate_certificate import GenerateCertificateCommand, GenerateCertificateHandler

__all__ = ["GenerateCertificateCommand", "GenerateCertificateHandler"]
