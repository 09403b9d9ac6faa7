"""Capabilities the pipeline needs from the remote service."""

from __future__ import annotations

from typing import Protocol, Sequence, runtime_checkable

from playlist_categorizer.core.models import ChannelDescriptor, PlaylistPage


@runtime_checkable
class PageFetcher(Protocol):
    """Fetches one page of a paginated playlist listing."""

    async def fetch_page(
        self,
        playlist_id: str,
        page_size: int,
        page_token: str | None = None,
    ) -> PlaylistPage:
        """Return the page at ``page_token``, or the first page when it is None."""
        ...


@runtime_checkable
class BatchFetcher(Protocol):
    """Resolves a bounded batch of channel IDs to descriptors."""

    async def fetch_batch(self, channel_ids: Sequence[str]) -> list[ChannelDescriptor]:
        """Return descriptors for the IDs the service knows; unknown IDs are omitted."""
        ...
