"""Core enums and type definitions."""

from enum import StrEnum


class SourceName(StrEnum):
    """YouTube Data API resources used by the pipeline."""

    PLAYLIST_ITEMS = "playlistItems"
    CHANNELS = "channels"


class EnrichmentStatus(StrEnum):
    """Outcome of the channel enrichment stage."""

    COMPLETE = "complete"
    SKIPPED = "skipped"  # not requested, or no channel IDs to resolve
    DEGRADED = "degraded"  # resolver failed, descriptions left empty
