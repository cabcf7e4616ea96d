from docsummary.logging.logger import Log
from docsummary.ocr.base import BaseOcrClient
from docsummary.ocr.exceptions import OcrError


class OcrFallbackAdapter:
    """Runs OCR over original file bytes, never raising on service failure."""

    def __init__(self, client: BaseOcrClient) -> None:
        self._client = client

    def recognize(self, document_bytes: bytes) -> str:
        """Return recognized lines, trimmed and space-joined, or "" on failure."""
        try:
            lines = self._client.detect_text(document_bytes)
        except OcrError as exc:
            Log.warning(f"OCR failed, keeping extracted text: {exc}")
            return ""
        return " ".join(line.strip() for line in lines if line.strip())
