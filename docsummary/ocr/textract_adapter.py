from typing import Any

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from docsummary.ocr.base import BaseOcrClient
from docsummary.ocr.exceptions import OcrError


class TextractOcrClient(BaseOcrClient):
    """OCR client backed by Amazon Textract DetectDocumentText."""

    def __init__(self, *, region: str | None = None, client: Any | None = None) -> None:
        self._client = client if client is not None else boto3.client("textract", region_name=region)

    def detect_text(self, document_bytes: bytes) -> list[str]:
        try:
            response = self._client.detect_document_text(Document={"Bytes": document_bytes})
        except (ClientError, BotoCoreError) as exc:
            raise OcrError(f"Textract request failed: {exc}") from exc
        blocks = response.get("Blocks") or []
        return [
            block["Text"]
            for block in blocks
            if block.get("BlockType") == "LINE" and block.get("Text")
        ]
