class StorageError(Exception):
    """Base for all storage errors."""


class CapacityError(StorageError):
    """The store has no room for the value being written."""


class CorruptDataError(StorageError):
    """Persisted payload is unparseable or not a JSON array."""


class NotFoundError(StorageError):
    """Entity not found."""


class DuplicateError(StorageError):
    """Identifier already used by a stored round."""
