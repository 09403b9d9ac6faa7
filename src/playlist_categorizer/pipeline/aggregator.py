"""Playlist aggregation: list, resolve channels, join."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Iterable, Mapping, Sequence

from playlist_categorizer.core.exceptions import (
    ConfigurationError,
    EnrichmentError,
    PlaylistFetchError,
    ValidationError,
)
from playlist_categorizer.core.models import (
    DEFAULT_PARAMS,
    DEFAULT_STRATEGY,
    ClusterRequest,
    PlaylistItem,
    Video,
)
from playlist_categorizer.core.types import EnrichmentStatus
from playlist_categorizer.pipeline.lister import PlaylistItemLister
from playlist_categorizer.pipeline.resolver import ChannelResolver

if TYPE_CHECKING:
    from playlist_categorizer.config import CategorizerSettings
    from playlist_categorizer.youtube.base import AbstractYouTubeClient

logger = logging.getLogger(__name__)

DEFAULT_DEADLINE = 90.0


def collect_channel_ids(items: Iterable[PlaylistItem]) -> list[str]:
    """Unique, non-empty uploader channel IDs in first-seen order."""
    return list(dict.fromkeys(item.channel_id for item in items if item.channel_id))


def join_descriptions(
    items: Iterable[PlaylistItem],
    descriptions: Mapping[str, str],
) -> list[Video]:
    """Attach channel descriptions to items, keeping item order."""
    return [
        Video.from_item(
            item,
            channel_description=descriptions.get(item.channel_id, "") if item.channel_id else "",
        )
        for item in items
    ]


class PlaylistAggregator:
    """
    Builds a ClusterRequest for one playlist.

    Each call runs Listing -> Resolving (optional) -> Joining under a single
    deadline. A listing failure fails the call; a resolving failure only leaves
    channel descriptions empty.

    Usage:
        async with PlaylistAggregator.from_settings(settings) as aggregator:
            request = await aggregator.aggregate("PL...")
    """

    def __init__(
        self,
        lister: PlaylistItemLister,
        resolver: ChannelResolver,
        deadline: float = DEFAULT_DEADLINE,
        *,
        clients: Sequence[AbstractYouTubeClient] = (),
    ) -> None:
        """
        Initialize the aggregator.

        Args:
            lister: Lists playlist items
            resolver: Resolves channel descriptions
            deadline: Seconds allowed for a whole aggregate() call
            clients: HTTP clients owned by this aggregator, closed by aclose()
        """
        if deadline <= 0:
            raise ValueError(f"deadline must be positive, got {deadline}")
        self._lister = lister
        self._resolver = resolver
        self.deadline = deadline
        self._clients = list(clients)

    @classmethod
    def from_settings(cls, settings: CategorizerSettings) -> PlaylistAggregator:
        """Create an aggregator bound to fresh YouTube clients."""
        from playlist_categorizer.youtube import (
            ChannelsClient,
            PlaylistItemsClient,
            YouTubeClientConfig,
        )

        if not settings.youtube_api_key:
            raise ConfigurationError("set YT_API_KEY environment variable")

        client_config = YouTubeClientConfig(
            api_key=settings.youtube_api_key,
            base_url=settings.youtube_base_url,
            timeout=settings.request_timeout,
        )
        items_client = PlaylistItemsClient(client_config)
        channels_client = ChannelsClient(client_config)

        return cls(
            lister=PlaylistItemLister(items_client, page_size=settings.page_size),
            resolver=ChannelResolver(
                channels_client,
                batch_size=settings.batch_size,
                max_concurrency=settings.max_concurrent_batches,
            ),
            deadline=settings.deadline,
            clients=[items_client, channels_client],
        )

    async def aggregate(
        self,
        playlist_id: str | None,
        *,
        strategy: str | None = None,
        fetch_channels: bool | None = None,
        params: Mapping[str, str] | None = None,
    ) -> ClusterRequest:
        """
        Build the cluster request for a playlist.

        Args:
            playlist_id: Playlist to list (required)
            strategy: Clustering strategy label, "hdbscan" when None or empty
            fetch_channels: Whether to resolve channel descriptions, True when None
            params: Strategy parameters; None means the default weights, an
                empty mapping is kept as given

        Returns:
            One Video per playlist item, in playlist order

        Raises:
            ValidationError: If playlist_id is missing or blank
            PlaylistFetchError: If listing fails or the deadline passes while listing
        """
        if not playlist_id or not playlist_id.strip():
            raise ValidationError("playlistId required", details={"field": "playlistId"})

        strategy = strategy or DEFAULT_STRATEGY
        if fetch_channels is None:
            fetch_channels = True
        params = dict(DEFAULT_PARAMS) if params is None else dict(params)

        deadline = asyncio.get_running_loop().time() + self.deadline

        items = await self._list(playlist_id, deadline)
        channel_ids = collect_channel_ids(items)
        descriptions, status = await self._enrich(channel_ids, fetch_channels, deadline)
        videos = join_descriptions(items, descriptions)

        logger.info(
            f"Aggregated playlist {playlist_id}: {len(videos)} videos, "
            f"{len(channel_ids)} channels, enrichment {status}"
        )
        return ClusterRequest(strategy=strategy, params=params, videos=videos)

    async def _list(self, playlist_id: str, deadline: float) -> list[PlaylistItem]:
        try:
            async with asyncio.timeout_at(deadline):
                return await self._lister.list_items(playlist_id)
        except asyncio.TimeoutError as e:
            raise PlaylistFetchError(
                f"deadline of {self.deadline:g}s exceeded while listing playlist {playlist_id}"
            ) from e

    async def _enrich(
        self,
        channel_ids: list[str],
        fetch_channels: bool,
        deadline: float,
    ) -> tuple[dict[str, str], EnrichmentStatus]:
        if not fetch_channels or not channel_ids:
            return {}, EnrichmentStatus.SKIPPED

        try:
            async with asyncio.timeout_at(deadline):
                descriptions = await self._resolver.resolve(channel_ids)
        except EnrichmentError as e:
            logger.warning(f"failed to fetch channel descriptions: {e.message}")
        except asyncio.TimeoutError:
            logger.warning(
                f"failed to fetch channel descriptions: deadline of {self.deadline:g}s exceeded"
            )
        else:
            return descriptions, EnrichmentStatus.COMPLETE

        return {}, EnrichmentStatus.DEGRADED

    async def aclose(self) -> None:
        """Close the HTTP clients this aggregator owns."""
        for client in self._clients:
            await client.close()

    async def __aenter__(self) -> PlaylistAggregator:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()
