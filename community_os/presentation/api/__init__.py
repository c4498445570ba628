"""
API Routers - FastAPI endpoint definitions.
"""

from community_os.presentation.api.communities import router as communities_router
from community_os.presentation.api.spaces import router as spaces_router
from community_os.presentation.api.posts import router as posts_router
from community_os.presentation.api.versions import router as versions_router
from community_os.presentation.api.comments import router as comments_router
from community_os.presentation.api.courses import router as courses_router
from community_os.presentation.api.certificates import router as certificates_router
from community_os.presentation.api.payments import router as payments_router
from community_os.presentation.api.webhooks import router as webhooks_router
from community_os.presentation.api.notifications import router as notifications_router
from community_os.presentation.api.search import router as search_router
from community_os.presentation.api.metrics import router as metrics_router

__all__ = [
    "communities_router",
    "spaces_router",
    "posts_router",
    "versions_router",
    "comments_router",
    "courses_router",
    "certificates_router",
    "payments_router",
    "webhooks_router",
    "notifications_router",
    "search_router",
    "metrics_router",
]
