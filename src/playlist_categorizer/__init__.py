"""Playlist categorizer - collects YouTube playlists into cluster requests."""

from playlist_categorizer.client import PlaylistCategorizerClient, fetch_playlist
from playlist_categorizer.core.exceptions import (
    CategorizerError,
    EnrichmentError,
    PlaylistFetchError,
    ValidationError,
)
from playlist_categorizer.core.models import ChannelDescriptor, ClusterRequest, PlaylistItem, Video
from playlist_categorizer.pipeline.aggregator import PlaylistAggregator

__version__ = "0.1.0"
__all__ = [
    # Client
    "PlaylistCategorizerClient",
    "PlaylistAggregator",
    "fetch_playlist",
    # Models
    "ChannelDescriptor",
    "ClusterRequest",
    "PlaylistItem",
    "Video",
    # Errors
    "CategorizerError",
    "EnrichmentError",
    "PlaylistFetchError",
    "ValidationError",
    # Version
    "__version__",
]
