"""Core types, models, and payload extraction."""

from .exceptions import (
    CategorizerError,
    ConfigurationError,
    EnrichmentError,
    PlaylistFetchError,
    UpstreamError,
    ValidationError,
)
from .extraction import (
    extract_channel_id,
    extract_video_id,
    parse_channel,
    parse_playlist_item,
)
from .models import (
    DEFAULT_PAGE_SIZE,
    DEFAULT_PARAMS,
    DEFAULT_STRATEGY,
    MAX_BATCH_SIZE,
    ChannelDescriptor,
    ClusterRequest,
    PlaylistItem,
    PlaylistPage,
    Video,
)
from .types import EnrichmentStatus, SourceName

__all__ = [
    # Types
    "EnrichmentStatus",
    "SourceName",
    # Models
    "ChannelDescriptor",
    "ClusterRequest",
    "PlaylistItem",
    "PlaylistPage",
    "Video",
    # Constants
    "DEFAULT_PAGE_SIZE",
    "DEFAULT_PARAMS",
    "DEFAULT_STRATEGY",
    "MAX_BATCH_SIZE",
    # Extraction
    "extract_channel_id",
    "extract_video_id",
    "parse_channel",
    "parse_playlist_item",
    # Exceptions
    "CategorizerError",
    "ConfigurationError",
    "EnrichmentError",
    "PlaylistFetchError",
    "UpstreamError",
    "ValidationError",
]
