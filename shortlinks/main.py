"""
FastAPI Application Entry Point

This module initializes the FastAPI application and configures:
- The process-wide short-link store
- API routes
- Middleware (logging, CORS, rate limiting)
- Application metadata

Run with:
    uvicorn shortlinks.main:app
"""

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from shortlinks.api import endpoints
from shortlinks.core.rate_limit import limiter
from shortlinks.core.setting import Settings, settings as default_settings
from shortlinks.middleware.logging import add_logging_middleware
from shortlinks.services.code_generator import CodeGenerator
from shortlinks.services.link_store import ShortLinkStore

logger = logging.getLogger(__name__)


def build_store(settings: Settings) -> ShortLinkStore:
    """Create a store configured from settings."""
    return ShortLinkStore(
        generator=CodeGenerator(length=settings.SHORT_CODE_LENGTH),
        max_attempts=settings.MAX_CODE_ATTEMPTS,
        location=settings.CLICK_LOCATION_PLACEHOLDER,
        max_url_length=settings.MAX_URL_LENGTH,
        max_code_length=settings.MAX_SHORT_CODE_LENGTH,
    )


def create_app(
    store: Optional[ShortLinkStore] = None,
    settings: Settings = default_settings
) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        store: Store to serve; a fresh one is built from settings if omitted
        settings: Application settings

    Returns:
        Configured FastAPI instance with the store on app.state.store
    """
    logging.getLogger("shortlinks").setLevel(settings.LOG_LEVEL.upper())

    app = FastAPI(
        title="Short-Link Service",
        description="Shortens URLs, resolves short codes and records click statistics",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    app.state.store = store if store is not None else build_store(settings)
    # The limiter is shared by every app in the process; the last app built wins
    limiter.enabled = settings.RATE_LIMIT_ENABLED
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    add_logging_middleware(app)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Health endpoint defined before router to match before catch-all route
    @app.get("/health", tags=["Health"])
    async def health_check():
        """Health check endpoint for monitoring."""
        return {"status": "healthy"}

    app.include_router(endpoints.router, tags=["Short Links"])

    logger.info(f"Application created (env={settings.ENV_SETTING.value})")
    return app


app = create_app()
