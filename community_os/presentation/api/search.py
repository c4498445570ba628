"""Search API Router."""

from typing import Optional

from fastapi import APIRouter, Query, Request
from dishka.integrations.fastapi import FromDishka, inject

from community_os.application.dto.search import SearchResponseDto
from community_os.application.queries.search import SearchHandler, SearchQuery
from community_os.config.settings import Config
from community_os.presentation.rate_limit import limiter
from community_os.presentation.schemas.base import parse_params
from community_os.presentation.schemas.search import SearchQuerySchema

router = APIRouter(prefix="/api", tags=["search"])


@router.get("/search", response_model=SearchResponseDto)
@limiter.limit(Config.SEARCH_RATE_LIMIT)
@inject
async def search(
    request: Request,
    handler: FromDishka[SearchHandler],
    q: str = Query(default=""),
    type: str = Query(default="all"),
    community_id: Optional[str] = Query(default=None, alias="communityId"),
    limit: int = Query(default=20),
    offset: int = Query(default=0),
):
    """
    Search posts, comments and members.

    Query parameters go through SearchQuerySchema so bad values answer 400
    with the same shape as body validation errors.
    """
    params = parse_params(
        SearchQuerySchema,
        q=q,
        type=type,
        community_id=community_id,
        limit=limit,
        offset=offset,
    )
    query = SearchQuery(
        q=params.q,
        type=params.type,
        community_id=params.community_id,
        limit=params.limit,
        offset=params.offset,
    )
    return await handler.execute(query)
