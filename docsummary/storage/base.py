from abc import ABC, abstractmethod


class BaseObjectStorage(ABC):
    """Contract for all object storage read adapters."""

    @abstractmethod
    def get_object_bytes(self, reference: str) -> bytes:
        """Read the full content of a stored object.

        Args:
            reference: Storage key of the object.

        Returns:
            Raw object bytes.

        Raises:
            StorageObjectNotFoundError: if no object exists under *reference*.
            StorageError: on any other access failure.
        """
