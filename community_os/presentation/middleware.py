"""HTTP middleware: correlation ids, request metrics and the auth gate."""

import logging
import re
import time

from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from community_os.config.logging_config import bind_correlation_id, reset_correlation_id
from community_os.observability.metrics import observe_request_latency
from community_os.presentation.dependencies.auth import (
    AuthenticationError,
    authenticate_header,
)

logger = logging.getLogger(__name__)

PUBLIC_PATHS = re.compile(
    r"^(/|/sign-in.*|/sign-up.*|/api/webhooks.*|/health|/metrics|/docs.*|/redoc|/openapi\.json)$"
)


def is_public_path(path: str) -> bool:
    return bool(PUBLIC_PATHS.match(path))


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """Binds X-Correlation-ID (or a fresh id) for logging and echoes it back."""

    async def dispatch(self, request: Request, call_next):
        correlation_id, token = bind_correlation_id(request.headers.get("X-Correlation-ID"))
        try:
            response = await call_next(request)
        finally:
            reset_correlation_id(token)
        response.headers["X-Correlation-ID"] = correlation_id
        return response


class MetricsMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        route = request.scope.get("route")
        # Route templates keep label cardinality bounded
        path = getattr(route, "path", "unmatched")
        observe_request_latency(
            request.method, path, response.status_code, time.perf_counter() - start
        )
        return response


class AuthMiddleware(BaseHTTPMiddleware):
    """Rejects non-public requests without a valid bearer JWT."""

    async def dispatch(self, request: Request, call_next):
        if request.method == "OPTIONS" or is_public_path(request.url.path):
            return await call_next(request)

        try:
            request.state.user_id = authenticate_header(
                request.headers.get("Authorization", "")
            )
        except AuthenticationError as e:
            logger.info(f"[AUTH] {request.method} {request.url.path} rejected: {e}")
            return JSONResponse(status_code=401, content={"error": str(e)})

        return await call_next(request)
