"""Request schemas for API endpoints."""

from __future__ import annotations

from typing import Annotated

from pydantic import Field

from playlist_categorizer.api.schemas.base import APIBaseSchema


class FetchPlaylistRequest(APIBaseSchema):
    """Request to build a cluster request from a playlist."""

    # Presence is checked by the aggregator so a missing ID is a 400, not a 422
    playlist_id: Annotated[
        str | None,
        Field(
            default=None,
            max_length=200,
            description="YouTube playlist ID.",
        ),
    ]

    strategy: Annotated[
        str | None,
        Field(
            default=None,
            max_length=100,
            description='Clustering strategy label. Defaults to "hdbscan".',
        ),
    ]

    fetch_channels: Annotated[
        bool | None,
        Field(
            default=None,
            description="Resolve uploader channel descriptions. Defaults to true.",
        ),
    ]

    params: Annotated[
        dict[str, str] | None,
        Field(
            default=None,
            description=(
                "Strategy parameters. Defaults to title_weight=0.8, channel_weight=0.2 "
                "when omitted; an empty object is kept as given."
            ),
        ),
    ]
