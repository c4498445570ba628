"""Search DTOs."""

from community_os.application.dto.base import CamelModel


class SearchResultDto(CamelModel):
    id: str
    type: str
    title: str
    snippet: str
    url: str
    relevance_score: float


class SearchResponseDto(CamelModel):
    results: list[SearchResultDto]
    total_count: int
    query: str
