from docsummary.logging.logger import Log
from docsummary.processor.exceptions import ContentUnavailableError, InputValidationError
from docsummary.processor.models import ContainerKind, Document, DocumentKind, LoadedContent
from docsummary.storage.base import BaseObjectStorage
from docsummary.storage.exceptions import StorageError

PDF_MAGIC = b"%PDF"


def classify_container(data: bytes) -> ContainerKind:
    """Classify bytes by their first four bytes: PDF or opaque text."""
    return ContainerKind.PDF if data[:4] == PDF_MAGIC else ContainerKind.OPAQUE


class ContentLoader:
    """Obtains raw bytes for a document and classifies their container."""

    def __init__(self, storage: BaseObjectStorage) -> None:
        self._storage = storage

    def load(self, document: Document) -> LoadedContent:
        """Return the document bytes and container kind.

        Notes carry their text inline and are always opaque. Files are read
        from the storage collaborator, once, without retries.

        Raises:
            ContentUnavailableError: if storage reports the object missing or unreadable.
        """
        if document.kind is DocumentKind.NOTE:
            return LoadedContent(
                raw_bytes=document.content.encode("utf-8"),
                container=ContainerKind.OPAQUE,
            )
        if not document.file_key:
            raise InputValidationError("fileKey is required for file summarization")
        try:
            data = self._storage.get_object_bytes(document.file_key)
        except StorageError as exc:
            raise ContentUnavailableError(f"Failed to fetch file: {exc}") from exc
        container = classify_container(data)
        Log.info(f"Fetched {len(data)} bytes for {document.file_key} ({container.value})")
        return LoadedContent(raw_bytes=data, container=container)
