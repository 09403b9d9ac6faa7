"""YouTube Data API bindings for the listing and enrichment stages."""

from playlist_categorizer.youtube.base import (
    YOUTUBE_API_URL,
    AbstractYouTubeClient,
    YouTubeClientConfig,
)
from playlist_categorizer.youtube.channels import ChannelsClient
from playlist_categorizer.youtube.playlist_items import PlaylistItemsClient

__all__ = [
    "YOUTUBE_API_URL",
    "AbstractYouTubeClient",
    "ChannelsClient",
    "PlaylistItemsClient",
    "YouTubeClientConfig",
]
