"""playlistItems.list client."""

from __future__ import annotations

from typing import Any, ClassVar

from playlist_categorizer.core.exceptions import UpstreamError
from playlist_categorizer.core.extraction import parse_playlist_item
from playlist_categorizer.core.models import PlaylistPage
from playlist_categorizer.core.types import SourceName
from playlist_categorizer.youtube.base import AbstractYouTubeClient


class PlaylistItemsClient(AbstractYouTubeClient):
    """
    Fetches single pages of a playlist.

    API Documentation: https://developers.google.com/youtube/v3/docs/playlistItems/list
    """

    SOURCE_NAME: ClassVar[SourceName] = SourceName.PLAYLIST_ITEMS
    PATH: ClassVar[str] = "/playlistItems"

    async def fetch_page(
        self,
        playlist_id: str,
        page_size: int,
        page_token: str | None = None,
    ) -> PlaylistPage:
        """Fetch one page of playlist items, starting at ``page_token`` if given."""
        params: dict[str, Any] = {
            "part": "snippet,contentDetails",
            "playlistId": playlist_id,
            "maxResults": page_size,
        }
        if page_token:
            params["pageToken"] = page_token

        data = await self._get_json(params)

        raw_items = data.get("items") or []
        if not isinstance(raw_items, list):
            raise UpstreamError(
                message="decode playlist page: items is not a list",
                source=self.source_name.value,
            )

        items = []
        for index, item in enumerate(raw_items):
            if not isinstance(item, dict):
                raise UpstreamError(
                    message=f"decode playlist page: item {index} is not an object",
                    source=self.source_name.value,
                )
            items.append(parse_playlist_item(item))

        next_page_token = data.get("nextPageToken")
        return PlaylistPage(
            items=items,
            next_page_token=next_page_token if isinstance(next_page_token, str) and next_page_token else None,
        )
