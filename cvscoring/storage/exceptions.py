class StorageError(Exception):
    """Raised when an object storage operation fails."""


class StorageObjectNotFoundError(StorageError):
    """Raised when the requested object does not exist."""
