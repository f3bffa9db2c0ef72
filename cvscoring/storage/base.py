from abc import ABC, abstractmethod


class BaseObjectStorage(ABC):
    """Contract for the bucket/key byte store shared with the CRUD layer."""

    @abstractmethod
    def download(self, bucket: str, key: str) -> bytes:
        """Return the object's bytes.

        Raises:
            StorageObjectNotFoundError: if the object does not exist.
            StorageError: on any other failure.
        """

    @abstractmethod
    def upload(
        self,
        bucket: str,
        key: str,
        data: bytes,
        content_type: str = "application/octet-stream",
    ) -> None:
        """Store *data* under *key*, overwriting any existing object.

        Raises:
            StorageError: if the object cannot be written.
        """

    @abstractmethod
    def list_keys(self, bucket: str, prefix: str) -> list[str]:
        """Return keys directly under *prefix*, most recently updated first."""
