from database.store import FileStore, KeyValueStore, MemoryStore
from database.repositories import DEFAULT_STORAGE_KEY, RoundRepository
from database.exceptions import (
    CapacityError,
    CorruptDataError,
    DuplicateError,
    NotFoundError,
    StorageError,
)

__all__ = [
    "FileStore",
    "KeyValueStore",
    "MemoryStore",
    "DEFAULT_STORAGE_KEY",
    "RoundRepository",
    "StorageError",
    "CapacityError",
    "CorruptDataError",
    "DuplicateError",
    "NotFoundError",
]
