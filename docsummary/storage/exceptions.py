class StorageError(Exception):
    """Raised when the object store cannot be read."""


class StorageObjectNotFoundError(StorageError):
    """Raised when the requested object does not exist."""
