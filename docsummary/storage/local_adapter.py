from pathlib import Path

from docsummary.storage.base import BaseObjectStorage
from docsummary.storage.exceptions import StorageError, StorageObjectNotFoundError


class LocalObjectStorage(BaseObjectStorage):
    """Resolves storage keys to files under a root directory."""

    FILES_ROOT = Path("/app/files")

    def __init__(self, files_root: Path | None = None) -> None:
        self._files_root = files_root if files_root is not None else self.FILES_ROOT

    def get_object_bytes(self, reference: str) -> bytes:
        path = self._resolve_path(reference)
        if not path.is_file():
            raise StorageObjectNotFoundError(f"File not found: {path}")
        try:
            return path.read_bytes()
        except OSError as exc:
            raise StorageError(f"Failed to read {path}: {exc}") from exc

    def _resolve_path(self, reference: str) -> Path:
        root = self._files_root.resolve()
        path = (root / reference).resolve()
        if root not in path.parents:
            raise StorageError(f"Storage key escapes files root: {reference!r}")
        return path
