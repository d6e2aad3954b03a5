"""Persistence gateway for the channel list."""

import asyncio
import logging

from livetv.domain.entities import Channel
from livetv.domain.repositories import KeyValueStore
from livetv.infrastructure.persistence.snapshot import decode_snapshot, encode_snapshot

logger = logging.getLogger(__name__)

DEFAULT_STORE_KEY = "channels"


class ChannelPersistenceGateway:
    """Loads and saves the channel list under a single store key.

    The whole list is written on every save. Background saves are chained
    so that writes reach the store in the order they were submitted.
    """

    def __init__(self, store: KeyValueStore, key: str = DEFAULT_STORE_KEY) -> None:
        """Initialize the gateway.

        Args:
            store: Async key-value store.
            key: Key the snapshot is stored under.
        """
        self._store = store
        self._key = key
        self._last_write: asyncio.Task[None] | None = None

    async def load(self) -> list[Channel] | None:
        """Load the stored channel list.

        Returns:
            Stored channels, or None when nothing (or an empty string) is
            stored.

        Raises:
            CorruptSnapshotError: The stored value cannot be decoded.
            StoreUnavailableError: The store could not be read.
        """
        raw = await self._store.get(self._key)
        if not raw:
            logger.debug("No channel snapshot stored under '%s'", self._key)
            return None
        return decode_snapshot(raw)

    async def save(self, channels: list[Channel]) -> None:
        """Overwrite the stored snapshot with the full list.

        Args:
            channels: Channels in display order.

        Raises:
            StoreUnavailableError: The store could not be written.
        """
        await self._store.set(self._key, encode_snapshot(channels))
        logger.debug("Saved %d channels", len(channels))

    def submit_save(self, channels: list[Channel]) -> None:
        """Schedule a save without waiting for it.

        The list is copied at call time. Failures are logged and dropped.
        Must be called from within a running event loop.

        Args:
            channels: Channels in display order.
        """
        snapshot = list(channels)
        previous = self._last_write
        self._last_write = asyncio.get_running_loop().create_task(
            self._write_after(previous, snapshot)
        )

    async def _write_after(
        self, previous: asyncio.Task[None] | None, channels: list[Channel]
    ) -> None:
        if previous is not None:
            # _write_after never raises, so this only waits for ordering
            await asyncio.shield(previous)
        try:
            await self.save(channels)
        except Exception:
            logger.exception("Failed to save channels; write dropped")

    async def flush(self) -> None:
        """Wait until every submitted save has finished."""
        if self._last_write is not None:
            await self._last_write

    async def clear(self) -> None:
        """Remove the stored snapshot.

        Raises:
            StoreUnavailableError: The store could not be written.
        """
        await self._store.delete(self._key)
        logger.info("Cleared channel snapshot '%s'", self._key)
