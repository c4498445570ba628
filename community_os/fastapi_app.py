"""
FastAPI Application Factory.
Creates and configures the FastAPI application with all routers, middleware, and DI.

Middleware (outermost first): CORS -> correlation id -> request metrics -> auth gate.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from dishka import AsyncContainer
from dishka.integrations.fastapi import setup_dishka
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException

from community_os.application.common.errors import ApplicationError
from community_os.config.logging_config import setup_logging
from community_os.config.settings import Config
from community_os.observability.metrics import increment_use_case_error
from community_os.presentation.api import (
    certificates_router,
    comments_router,
    communities_router,
    courses_router,
    metrics_router,
    notifications_router,
    payments_router,
    posts_router,
    search_router,
    spaces_router,
    versions_router,
    webhooks_router,
)
from community_os.presentation.middleware import (
    AuthMiddleware,
    CorrelationIdMiddleware,
    MetricsMiddleware,
)
from community_os.presentation.rate_limit import limiter
from community_os.setup.ioc.container import create_container

# Setup logging
setup_logging(Config.LOG_LEVEL, Config.LOG_PATH)
logger = logging.getLogger(__name__)


def create_fastapi_app(container: Optional[AsyncContainer] = None) -> FastAPI:
    """
    Application factory for creating FastAPI app.

    The container must exist before the app starts because Dishka adds
    middleware, which cannot happen once the app is running.
    """
    container = container or create_container()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("FastAPI application started. DI container initialized.")
        yield
        # Disconnects Prisma and closes the Stripe HTTP client
        await container.close()
        logger.info("FastAPI application shutdown. DI container closed.")

    app = FastAPI(
        title="Community OS API",
        description="Communities, content, courses and paid memberships",
        version="1.0.0",
        lifespan=lifespan,
    )

    setup_dishka(container, app)

    app.state.limiter = limiter

    app.add_middleware(AuthMiddleware)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(CorrelationIdMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=Config.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(ApplicationError)
    async def application_error_handler(request: Request, exc: ApplicationError):
        status_code = exc.status_code
        log = logger.error if status_code >= 500 else logger.info
        log(f"[{exc.feature.upper()}] {request.method} {request.url.path} -> {exc.code.value}: {exc.message}")
        increment_use_case_error(exc.feature, exc.code.value)
        return JSONResponse(
            status_code=status_code,
            content={"error": exc.code.value, "message": exc.message},
        )

    # Validation error handler - shows detailed Pydantic errors
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        errors = [
            {key: value for key, value in error.items() if key in ("loc", "msg", "type")}
            for error in exc.errors()
        ]
        logger.info(f"[VALIDATION ERROR] {request.method} {request.url.path}: {errors}")
        return JSONResponse(
            status_code=400,
            content={"error": "Validation error", "details": errors},
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        logger.info(f"[HTTP ERROR {exc.status_code}] {exc.detail}")
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
        )

    @app.exception_handler(RateLimitExceeded)
    async def rate_limit_handler(request: Request, exc: RateLimitExceeded):
        logger.warning(f"[RATE LIMIT] {request.method} {request.url.path}: {exc.detail}")
        return JSONResponse(
            status_code=429,
            content={"error": f"Rate limit exceeded: {exc.detail}"},
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.exception(f"[GLOBAL ERROR] {type(exc).__name__}: {exc}")
        return JSONResponse(
            status_code=500,
            content={"error": "Internal server error"},
        )

    # Health check routes
    @app.get("/", tags=["health"])
    async def root():
        return {"message": "FastAPI server is running."}

    @app.get("/health", tags=["health"])
    async def health():
        return {"status": "healthy"}

    # Register routers
    app.include_router(communities_router)
    app.include_router(spaces_router)
    app.include_router(posts_router)
    app.include_router(versions_router)
    app.include_router(comments_router)
    app.include_router(courses_router)
    app.include_router(certificates_router)
    app.include_router(payments_router)
    app.include_router(webhooks_router)
    app.include_router(notifications_router)
    app.include_router(search_router)
    app.include_router(metrics_router)

    return app


# Create the app instance
app = create_fastapi_app()
