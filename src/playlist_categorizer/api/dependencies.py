"""FastAPI dependency injection."""

from __future__ import annotations

from collections.abc import AsyncIterator
from typing import Annotated

from fastapi import Depends

from playlist_categorizer.config import CategorizerSettings, get_settings
from playlist_categorizer.pipeline.aggregator import PlaylistAggregator


async def get_aggregator(
    settings: CategorizerSettings = Depends(get_settings),
) -> AsyncIterator[PlaylistAggregator]:
    """
    Get a playlist aggregator for the current request.

    Every request gets its own YouTube clients, closed once the response is
    produced.
    """
    async with PlaylistAggregator.from_settings(settings) as aggregator:
        yield aggregator


# Type aliases for cleaner dependency injection
Settings = Annotated[CategorizerSettings, Depends(get_settings)]
Aggregator = Annotated[PlaylistAggregator, Depends(get_aggregator)]
