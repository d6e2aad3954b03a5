"""Persistence-related exceptions."""


class PersistenceError(Exception):
    """Base exception for persistence-related errors."""


class DatabaseError(PersistenceError):
    """Database operation error."""


class StoreUnavailableError(DatabaseError):
    """The key-value store could not be read or written."""


class CorruptSnapshotError(PersistenceError):
    """The persisted channel snapshot could not be decoded."""
