"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shared.config import get_settings
from shared.exceptions import WaitlistError
from .dependencies import get_container
from .models.errors import waitlist_error_handler
from .routes import admin, health
from modules.content.routes import router as content_router
from modules.drops.routes import router as drops_router
from modules.insights.routes import router as insights_router
from modules.signups.routes import router as signups_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Opens the document store up front so a missing or corrupt data file
    fails at startup instead of on the first request.
    """
    # Startup
    settings = get_settings()
    store = get_container().store
    logger.info(f"Starting {settings.app_name} on {settings.host}:{settings.port} (store: {store.path})")
    yield
    # Shutdown
    logger.info(f"Shutting down {settings.app_name}")


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI instance
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Waitlist, referral and early-access backend for SNOOOM drops",
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/api/docs" if settings.debug else None,
        redoc_url="/api/redoc" if settings.debug else None,
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    app.add_exception_handler(WaitlistError, waitlist_error_handler)

    # Register routes
    app.include_router(health.router, prefix="/api", tags=["health"])
    app.include_router(signups_router, prefix="/api", tags=["signups"])
    app.include_router(content_router, prefix="/api", tags=["content"])
    app.include_router(drops_router, prefix="/api", tags=["drops"])
    app.include_router(insights_router, prefix="/api", tags=["insights"])
    app.include_router(admin.router, prefix="/api/admin", tags=["admin"])

    return app


# Application instance for uvicorn
app = create_app()
