"""Domain repositories."""

from livetv.domain.repositories.key_value_store import KeyValueStore

__all__ = ["KeyValueStore"]
