"""FastAPI application factory."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from playlist_categorizer import __version__
from playlist_categorizer.api.routes import health_router, playlist_router
from playlist_categorizer.config import get_settings
from playlist_categorizer.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """
    Application lifespan manager.

    Refuses to start without a YouTube API key.
    """
    settings = get_settings()

    if not settings.youtube_api_key:
        logger.error("set YT_API_KEY environment variable")
        raise ConfigurationError("set YT_API_KEY environment variable")

    logger.info(
        f"Application startup complete (deadline={settings.deadline:g}s, "
        f"page_size={settings.page_size}, batch_size={settings.batch_size})"
    )

    yield

    logger.info("Application shutdown complete")


async def _request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report malformed request bodies as 400 Bad Request."""
    return JSONResponse(
        status_code=400,
        content={"detail": f"bad request: {exc.errors()}"},
    )


async def _configuration_error_handler(request: Request, exc: ConfigurationError) -> JSONResponse:
    logger.error(f"Configuration error: {exc.message}")
    return JSONResponse(status_code=500, content={"detail": exc.message})


def create_app(
    *,
    title: str = "Playlist Categorizer API",
    description: str = "Collects YouTube playlists into cluster requests",
    version: str = __version__,
    cors_origins: list[str] | None = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        title: API title for OpenAPI docs
        description: API description for OpenAPI docs
        version: API version
        cors_origins: List of allowed CORS origins, taken from settings if not given

    Returns:
        Configured FastAPI application
    """
    app = FastAPI(
        title=title,
        description=description,
        version=version,
        lifespan=lifespan,
        openapi_url="/api/openapi.json",
        docs_url="/api/docs",
        redoc_url="/api/redoc",
    )

    if cors_origins is None:
        cors_origins = get_settings().cors_origins

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RequestValidationError, _request_validation_handler)
    app.add_exception_handler(ConfigurationError, _configuration_error_handler)

    # Register routes
    app.include_router(health_router, prefix="/api")
    app.include_router(playlist_router, prefix="/api")

    return app


# For uvicorn direct execution
app = create_app()
