"""
Prometheus metrics endpoint.

Public route (see middleware.PUBLIC_PATHS). Values are recorded in
observability/metrics.py by the metrics middleware and the exception handlers.
"""

from fastapi import APIRouter, Response

from community_os.observability.metrics import get_metrics_content


router = APIRouter(prefix="/metrics", tags=["observability"])


@router.get("")
async def metrics():
    """Return all metrics in Prometheus text format."""
    content, content_type = get_metrics_content()
    return Response(content=content, media_type=content_type)
