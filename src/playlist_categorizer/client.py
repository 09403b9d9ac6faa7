"""Main library client for standalone usage."""

from __future__ import annotations

import logging
from typing import Mapping

from playlist_categorizer.config import CategorizerSettings
from playlist_categorizer.core.exceptions import ConfigurationError
from playlist_categorizer.core.models import ClusterRequest
from playlist_categorizer.pipeline.aggregator import PlaylistAggregator

logger = logging.getLogger(__name__)


class PlaylistCategorizerClient:
    """
    Main client for the playlist_categorizer library.

    Builds cluster requests without running the web server.

    Usage:
        async with PlaylistCategorizerClient() as client:
            request = await client.build_cluster_request("PLxxxx")

            # Skip channel descriptions, custom parameters
            request = await client.build_cluster_request(
                "PLxxxx", fetch_channels=False, params={"min_cluster_size": "3"}
            )

    Settings are loaded from environment variables or can be passed explicitly.
    """

    def __init__(self, settings: CategorizerSettings | None = None) -> None:
        """
        Initialize the client.

        Args:
            settings: Application settings. If not provided, loaded from environment.
        """
        self._settings = settings or CategorizerSettings()
        self._entered = False

    async def __aenter__(self) -> PlaylistCategorizerClient:
        if not self._settings.youtube_api_key:
            raise ConfigurationError("set YT_API_KEY environment variable")
        self._entered = True
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def close(self) -> None:
        self._entered = False

    def _ensure_initialized(self) -> None:
        if not self._entered:
            raise RuntimeError(
                "Client not initialized. Use 'async with PlaylistCategorizerClient() as client:'"
            )

    async def build_cluster_request(
        self,
        playlist_id: str,
        *,
        strategy: str | None = None,
        fetch_channels: bool | None = None,
        params: Mapping[str, str] | None = None,
    ) -> ClusterRequest:
        """
        Aggregate a playlist into a cluster request.

        Args:
            playlist_id: YouTube playlist ID
            strategy: Clustering strategy label ("hdbscan" if not given)
            fetch_channels: Resolve uploader channel descriptions (True if not given)
            params: Strategy parameters (default weights if not given)

        Returns:
            The cluster request, one video per playlist item
        """
        self._ensure_initialized()

        # Fresh HTTP clients per call; nothing carries over between playlists
        async with PlaylistAggregator.from_settings(self._settings) as aggregator:
            return await aggregator.aggregate(
                playlist_id,
                strategy=strategy,
                fetch_channels=fetch_channels,
                params=params,
            )


async def fetch_playlist(
    playlist_id: str,
    *,
    settings: CategorizerSettings | None = None,
    strategy: str | None = None,
    fetch_channels: bool | None = None,
    params: Mapping[str, str] | None = None,
) -> ClusterRequest:
    """
    Convenience function to aggregate a single playlist.

    Usage:
        request = await fetch_playlist("PLxxxx")
    """
    async with PlaylistCategorizerClient(settings) as client:
        return await client.build_cluster_request(
            playlist_id,
            strategy=strategy,
            fetch_channels=fetch_channels,
            params=params,
        )
