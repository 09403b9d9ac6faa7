"""Playlist aggregation endpoint."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException

from playlist_categorizer.api.dependencies import Aggregator
from playlist_categorizer.api.schemas import (
    ClusterRequestResponse,
    FetchPlaylistRequest,
    VideoResponse,
)
from playlist_categorizer.core.exceptions import PlaylistFetchError, ValidationError
from playlist_categorizer.core.models import ClusterRequest

logger = logging.getLogger(__name__)

router = APIRouter(tags=["playlist"])


def _convert_cluster_request(request: ClusterRequest) -> ClusterRequestResponse:
    """Convert domain ClusterRequest to API response."""
    return ClusterRequestResponse(
        strategy=request.strategy,
        params=request.params,
        videos=[
            VideoResponse(
                video_id=v.video_id,
                title=v.title,
                channel_id=v.channel_id,
                channel_description=v.channel_description,
                playlist_id=v.playlist_id,
                position=v.position,
            )
            for v in request.videos
        ],
    )


@router.post(
    "/fetch-playlist",
    response_model=ClusterRequestResponse,
    operation_id="fetchPlaylist",
    summary="Aggregate a playlist",
    description=(
        "List every video of a YouTube playlist, attach uploader channel "
        "descriptions and return the cluster request."
    ),
)
async def fetch_playlist(
    request: FetchPlaylistRequest,
    aggregator: Aggregator,
) -> ClusterRequestResponse:
    """Build a cluster request for the requested playlist."""
    try:
        result = await aggregator.aggregate(
            request.playlist_id,
            strategy=request.strategy,
            fetch_channels=request.fetch_channels,
            params=request.params,
        )
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=e.message) from e
    except PlaylistFetchError as e:
        logger.error(f"Playlist fetch failed: {e.message} (status={e.status_code}, details={e.details})")
        raise HTTPException(status_code=500, detail=f"failed fetch playlist: {e.message}") from e

    return _convert_cluster_request(result)
