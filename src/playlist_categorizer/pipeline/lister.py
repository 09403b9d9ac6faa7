"""Exhaustive playlist listing over cursor-based pagination."""

from __future__ import annotations

import logging

from playlist_categorizer.core.exceptions import PlaylistFetchError, UpstreamError
from playlist_categorizer.core.models import DEFAULT_PAGE_SIZE, MAX_BATCH_SIZE, PlaylistItem
from playlist_categorizer.pipeline.ports import PageFetcher

logger = logging.getLogger(__name__)


class PlaylistItemLister:
    """
    Collects every item of a playlist.

    Pages are requested one after another, following ``nextPageToken`` until a
    page comes back without one. The service's pagination contract is the only
    bound on the number of pages.
    """

    def __init__(self, fetcher: PageFetcher, page_size: int = DEFAULT_PAGE_SIZE) -> None:
        if not 1 <= page_size <= MAX_BATCH_SIZE:
            raise ValueError(f"page_size must be between 1 and {MAX_BATCH_SIZE}, got {page_size}")
        self._fetcher = fetcher
        self.page_size = page_size

    async def list_items(self, playlist_id: str) -> list[PlaylistItem]:
        """
        List all items of a playlist in source order.

        Args:
            playlist_id: The playlist to list

        Returns:
            Every item across all pages, in the order the service returned them

        Raises:
            PlaylistFetchError: If any page request fails. Items from earlier
                pages are discarded.
        """
        items: list[PlaylistItem] = []
        page_token: str | None = None
        pages = 0

        while True:
            try:
                page = await self._fetcher.fetch_page(playlist_id, self.page_size, page_token)
            except UpstreamError as e:
                raise PlaylistFetchError(
                    message=f"page {pages + 1}: {e.message}",
                    status_code=e.status_code,
                    details=e.details,
                ) from e

            pages += 1
            items.extend(page.items)
            logger.debug(
                f"Playlist {playlist_id} page {pages}: {len(page.items)} items, "
                f"more={page.has_next}"
            )

            if not page.has_next:
                break
            page_token = page.next_page_token

        logger.info(f"Listed {len(items)} items from playlist {playlist_id} in {pages} pages")
        return items
