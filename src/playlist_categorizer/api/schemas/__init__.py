"""API schema definitions."""

from playlist_categorizer.api.schemas.base import APIBaseSchema, to_camel_case
from playlist_categorizer.api.schemas.requests import FetchPlaylistRequest
from playlist_categorizer.api.schemas.responses import (
    ClusterRequestResponse,
    HealthResponse,
    VideoResponse,
)

__all__ = [
    # Base
    "APIBaseSchema",
    "to_camel_case",
    # Requests
    "FetchPlaylistRequest",
    # Responses
    "ClusterRequestResponse",
    "HealthResponse",
    "VideoResponse",
]
