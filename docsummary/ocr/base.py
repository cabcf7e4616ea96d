from abc import ABC, abstractmethod


class BaseOcrClient(ABC):
    """Contract for provider-specific OCR clients."""

    @abstractmethod
    def detect_text(self, document_bytes: bytes) -> list[str]:
        """Recognize text lines in a scanned document.

        Args:
            document_bytes: Raw image or single-page PDF content.

        Returns:
            Recognized lines in reading order.

        Raises:
            OcrError: on any service failure.
        """
