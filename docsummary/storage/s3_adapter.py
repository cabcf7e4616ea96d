from typing import Any

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from docsummary.storage.base import BaseObjectStorage
from docsummary.storage.exceptions import StorageError, StorageObjectNotFoundError

_NOT_FOUND_CODES = frozenset({"NoSuchKey", "NoSuchBucket", "404", "NotFound"})


class S3ObjectStorage(BaseObjectStorage):
    """Reads objects from a single S3 bucket."""

    def __init__(
        self,
        *,
        bucket: str,
        region: str | None = None,
        client: Any | None = None,
    ) -> None:
        self._bucket = bucket
        self._client = client if client is not None else boto3.client("s3", region_name=region)

    def get_object_bytes(self, reference: str) -> bytes:
        try:
            response = self._client.get_object(Bucket=self._bucket, Key=reference)
            return response["Body"].read()
        except ClientError as exc:
            code = str(exc.response.get("Error", {}).get("Code", ""))
            if code in _NOT_FOUND_CODES:
                raise StorageObjectNotFoundError(
                    f"Object not found: s3://{self._bucket}/{reference}"
                ) from exc
            raise StorageError(f"S3 read failed for {reference}: {exc}") from exc
        except BotoCoreError as exc:
            raise StorageError(f"S3 read failed for {reference}: {exc}") from exc
