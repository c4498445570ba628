"""
Certificate Renderer Port - Produces the printable certificate document.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from community_os.domain.entities.certificate import Certificate


class CertificateRenderingError(Exception):
    """The document could not be produced."""


class CertificateRenderer(ABC):
    @abstractmethod
    async def render(self, certificate: Certificate) -> str:
        """Render the certificate and return its public URL."""
        ...

    @abstractmethod
    def path_for(self, certificate_id: str) -> Path:
        """Local file location of a rendered certificate."""
        ...
