"""Response schemas for API endpoints."""

from __future__ import annotations

from typing import Literal

from pydantic import Field

from playlist_categorizer.api.schemas.base import APIBaseSchema


class VideoResponse(APIBaseSchema):
    """One playlist video with its uploader's channel description."""

    video_id: str
    title: str
    channel_id: str
    channel_description: str = ""
    playlist_id: str
    position: int = 0


class ClusterRequestResponse(APIBaseSchema):
    """Aggregated playlist, ready to forward to the clustering service."""

    strategy: str
    params: dict[str, str] = Field(default_factory=dict)
    videos: list[VideoResponse] = Field(default_factory=list)


class HealthResponse(APIBaseSchema):
    """Health check response."""

    status: Literal["healthy", "degraded", "unhealthy"]
    version: str
    services: dict[str, Literal["up", "down", "unknown"]]
