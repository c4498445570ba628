"""Content version DTOs."""

from community_os.application.dto.base import CamelModel


class ContentVersionDto(CamelModel):
    id: str
    content_type: str
    content_id: str
    content: str
    version_number: int
    created_at: str


class VersionComparisonDto(CamelModel):
    old_version: ContentVersionDto
    new_version: ContentVersionDto
