"""Batched channel description lookup."""

from __future__ import annotations

import asyncio
import logging
from typing import Collection, Iterator, Sequence, TypeVar

from playlist_categorizer.core.exceptions import EnrichmentError, UpstreamError
from playlist_categorizer.core.models import MAX_BATCH_SIZE, ChannelDescriptor
from playlist_categorizer.pipeline.ports import BatchFetcher

logger = logging.getLogger(__name__)

T = TypeVar("T")


def chunked(values: Sequence[T], size: int) -> Iterator[list[T]]:
    """Split ``values`` into contiguous chunks of at most ``size``."""
    if size < 1:
        raise ValueError(f"chunk size must be positive, got {size}")
    for start in range(0, len(values), size):
        yield list(values[start : start + size])


class ChannelResolver:
    """
    Resolves channel IDs to descriptions in batches of at most 50.

    Batches are independent and run concurrently up to ``max_concurrency``.
    The merge follows batch order, so the result does not depend on which
    request finishes first. A single failed batch fails the whole call.
    """

    def __init__(
        self,
        fetcher: BatchFetcher,
        batch_size: int = MAX_BATCH_SIZE,
        max_concurrency: int = 4,
    ) -> None:
        if not 1 <= batch_size <= MAX_BATCH_SIZE:
            raise ValueError(f"batch_size must be between 1 and {MAX_BATCH_SIZE}, got {batch_size}")
        if max_concurrency < 1:
            raise ValueError(f"max_concurrency must be positive, got {max_concurrency}")
        self._fetcher = fetcher
        self.batch_size = batch_size
        self.max_concurrency = max_concurrency

    async def resolve(self, channel_ids: Collection[str]) -> dict[str, str]:
        """
        Look up descriptions for a set of channel IDs.

        Args:
            channel_ids: Unique, non-empty channel IDs

        Returns:
            Mapping of channel ID to description for every channel the service
            returned. IDs it does not know are absent.

        Raises:
            EnrichmentError: If any batch request fails. Results of batches
                that already completed are discarded.
        """
        batches = list(chunked(list(channel_ids), self.batch_size))
        if not batches:
            return {}

        semaphore = asyncio.Semaphore(self.max_concurrency)

        async def run(batch: list[str]) -> list[ChannelDescriptor]:
            async with semaphore:
                descriptors = await self._fetcher.fetch_batch(batch)
            logger.debug(f"Resolved {len(descriptors)} of {len(batch)} channels")
            return descriptors

        tasks = [asyncio.ensure_future(run(batch)) for batch in batches]
        try:
            results = await asyncio.gather(*tasks)
        except UpstreamError as e:
            raise EnrichmentError(
                message=f"failed to fetch channel descriptions: {e.message}",
                status_code=e.status_code,
                details=e.details,
            ) from e
        finally:
            pending = [task for task in tasks if not task.done()]
            for task in pending:
                task.cancel()
            if pending:
                await asyncio.wait(pending)

        descriptions: dict[str, str] = {}
        for descriptors in results:
            for descriptor in descriptors:
                descriptions[descriptor.channel_id] = descriptor.description

        logger.info(
            f"Resolved {len(descriptions)} of {len(channel_ids)} channels "
            f"in {len(batches)} batches"
        )
        return descriptions
