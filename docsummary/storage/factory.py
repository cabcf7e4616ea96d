from pathlib import Path

from docsummary.config.settings import Settings
from docsummary.storage.base import BaseObjectStorage
from docsummary.storage.local_adapter import LocalObjectStorage
from docsummary.storage.s3_adapter import S3ObjectStorage


class StorageFactory:
    """Creates the configured object storage adapter."""

    BACKENDS = ("local", "s3")

    @classmethod
    def create(cls, settings: Settings) -> BaseObjectStorage:
        backend = settings.storage_backend.lower()
        if backend == "s3":
            return S3ObjectStorage(
                bucket=settings.storage_bucket,
                region=settings.storage_region or None,
            )
        if backend == "local":
            return LocalObjectStorage(files_root=Path(settings.local_files_root))
        raise ValueError(
            f"Unknown storage backend '{backend}'. Choose from: {list(cls.BACKENDS)}"
        )
