"""
Certificate Repository Port - Interface for certificate persistence.
"""

from abc import ABC, abstractmethod
from typing import Optional
from community_os.domain.entities.certificate import Certificate


class CertificateRepository(ABC):
    @abstractmethod
    async def create(self, certificate: Certificate) -> Certificate: ...

    @abstractmethod
    async def find_by_id(self, certificate_id: str) -> Optional[Certificate]: ...

    @abstractmethod
    async def find_by_verification_code(self, code: str) -> Optional[Certificate]: ...

    @abstractmethod
    async def find_by_user_id(self, user_id: str) -> list[Certificate]: ...

    @abstractmethod
    async def find_by_user_and_course(
        self, user_id: str, course_id: str
    ) -> Optional[Certificate]: ...

    @abstractmethod
    async def update(self, certificate: Certificate) -> Certificate: ...
