"""Main FastAPI application entry point.

This module initializes the FastAPI application with its routers,
middleware and lifecycle events.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware

from newsdesk.adapters.news_sources.registry import AdapterRegistry
from newsdesk.api.routers import demo, health, news
from newsdesk.core.config import settings
from newsdesk.utils.logging import get_logger, setup_logging

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifecycle events.

    Configures logging on startup and reports which news sources have
    credentials. Missing credentials are logged, not fatal.

    Args:
        app: FastAPI application instance
    """
    setup_logging()

    logger.info("=" * 80)
    logger.info(f"Starting {settings.api_title}")
    logger.info(f"Environment: {settings.environment}")

    configured = AdapterRegistry.from_settings(settings).configured_sources()
    for source, is_configured in configured.items():
        if is_configured:
            logger.info(f"News source {source}: configured")
        else:
            logger.warning(f"News source {source}: no API key, it will be skipped")
    logger.info("=" * 80)

    yield

    logger.info(f"Shutting down {settings.api_title}")


app = FastAPI(
    title=settings.api_title,
    description=(
        "News aggregation API: one filter query fanned out to The Guardian, "
        "The New York Times and NewsAPI.org, with results normalized into a "
        "single article shape and merged newest first."
    ),
    version=settings.api_version,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.api_cors_origins,
    allow_credentials=False,
    allow_methods=settings.api_cors_allow_methods,
    allow_headers=settings.api_cors_allow_headers,
)

app.add_middleware(
    GZipMiddleware,
    minimum_size=1000,  # Only compress responses larger than 1KB
)

app.include_router(news.router, prefix="/api", tags=["news"])
app.include_router(demo.router, prefix="/api", tags=["demo"])
app.include_router(health.router, prefix="/api", tags=["health"])


@app.get("/")
async def root():
    """Root endpoint providing API information.

    Returns:
        Basic API information and links to documentation
    """
    return {
        "name": settings.api_title,
        "version": settings.api_version,
        "status": "operational",
        "docs": "/docs",
        "redoc": "/redoc",
        "openapi": "/openapi.json",
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "newsdesk.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=True,
        log_level="info",
    )
