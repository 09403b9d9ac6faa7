"""channels.list client."""

from __future__ import annotations

from typing import ClassVar, Sequence

from playlist_categorizer.core.exceptions import UpstreamError
from playlist_categorizer.core.extraction import parse_channel
from playlist_categorizer.core.models import MAX_BATCH_SIZE, ChannelDescriptor
from playlist_categorizer.core.types import SourceName
from playlist_categorizer.youtube.base import AbstractYouTubeClient


class ChannelsClient(AbstractYouTubeClient):
    """
    Looks up channel snippets by ID.

    API Documentation: https://developers.google.com/youtube/v3/docs/channels/list

    channels.list accepts at most 50 comma-separated IDs per call.
    """

    SOURCE_NAME: ClassVar[SourceName] = SourceName.CHANNELS
    PATH: ClassVar[str] = "/channels"

    async def fetch_batch(self, channel_ids: Sequence[str]) -> list[ChannelDescriptor]:
        """Fetch descriptors for up to 50 channels. Unknown IDs are left out of the result."""
        if not channel_ids:
            return []
        if len(channel_ids) > MAX_BATCH_SIZE:
            raise ValueError(
                f"channels.list accepts at most {MAX_BATCH_SIZE} ids, got {len(channel_ids)}"
            )

        data = await self._get_json({"part": "snippet", "id": ",".join(channel_ids)})

        raw_items = data.get("items") or []
        if not isinstance(raw_items, list):
            raise UpstreamError(
                message="decode channels response: items is not a list",
                source=self.source_name.value,
            )

        descriptors = []
        for item in raw_items:
            if not isinstance(item, dict):
                continue
            descriptor = parse_channel(item)
            if descriptor is not None:
                descriptors.append(descriptor)
        return descriptors
