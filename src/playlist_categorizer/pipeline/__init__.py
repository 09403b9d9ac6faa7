"""Listing, enrichment and aggregation pipeline."""

from playlist_categorizer.pipeline.aggregator import (
    DEFAULT_DEADLINE,
    PlaylistAggregator,
    collect_channel_ids,
    join_descriptions,
)
from playlist_categorizer.pipeline.lister import PlaylistItemLister
from playlist_categorizer.pipeline.ports import BatchFetcher, PageFetcher
from playlist_categorizer.pipeline.resolver import ChannelResolver, chunked

__all__ = [
    # Ports
    "BatchFetcher",
    "PageFetcher",
    # Stages
    "ChannelResolver",
    "PlaylistItemLister",
    "chunked",
    # Aggregation
    "DEFAULT_DEADLINE",
    "PlaylistAggregator",
    "collect_channel_ids",
    "join_descriptions",
]
