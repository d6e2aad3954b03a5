"""Persistence infrastructure."""

from livetv.infrastructure.persistence.channel_gateway import (
    DEFAULT_STORE_KEY,
    ChannelPersistenceGateway,
)
from livetv.infrastructure.persistence.database import DatabaseManager
from livetv.infrastructure.persistence.exceptions import (
    CorruptSnapshotError,
    DatabaseError,
    PersistenceError,
    StoreUnavailableError,
)
from livetv.infrastructure.persistence.key_value_store import SQLiteKeyValueStore
from livetv.infrastructure.persistence.models import KeyValueModel
from livetv.infrastructure.persistence.snapshot import (
    ChannelRecord,
    decode_snapshot,
    encode_snapshot,
)

__all__ = [
    "DEFAULT_STORE_KEY",
    "ChannelPersistenceGateway",
    "ChannelRecord",
    "CorruptSnapshotError",
    "DatabaseError",
    "DatabaseManager",
    "KeyValueModel",
    "PersistenceError",
    "SQLiteKeyValueStore",
    "StoreUnavailableError",
    "decode_snapshot",
    "encode_snapshot",
]
