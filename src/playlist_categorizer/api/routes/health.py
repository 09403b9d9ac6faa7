"""Health check endpoints."""

from __future__ import annotations

from typing import Literal

from fastapi import APIRouter

from playlist_categorizer import __version__
from playlist_categorizer.api.dependencies import Settings
from playlist_categorizer.api.schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    operation_id="getHealth",
    summary="Health check",
    description="Check whether the service is configured to reach the YouTube Data API.",
)
async def health_check(settings: Settings) -> HealthResponse:
    """Check API health status."""
    # Configuration only; probing YouTube would spend API quota
    youtube: Literal["up", "down", "unknown"] = "up" if settings.youtube_api_key else "down"

    return HealthResponse(
        status="healthy" if youtube == "up" else "unhealthy",
        version=__version__,
        services={"youtube": youtube},
    )
