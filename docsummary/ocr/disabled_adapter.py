from docsummary.ocr.base import BaseOcrClient


class DisabledOcrClient(BaseOcrClient):
    """OCR client that recognizes nothing; used where no OCR service is deployed."""

    def detect_text(self, document_bytes: bytes) -> list[str]:
        _ = document_bytes
        return []
