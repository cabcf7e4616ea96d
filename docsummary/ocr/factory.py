from docsummary.config.settings import Settings
from docsummary.ocr.base import BaseOcrClient
from docsummary.ocr.disabled_adapter import DisabledOcrClient
from docsummary.ocr.fallback import OcrFallbackAdapter
from docsummary.ocr.textract_adapter import TextractOcrClient


class OcrFactory:
    """Creates the OCR fallback adapter for the configured provider."""

    PROVIDERS = ("disabled", "textract")

    @classmethod
    def create(cls, settings: Settings) -> OcrFallbackAdapter:
        return OcrFallbackAdapter(cls._create_client(settings))

    @classmethod
    def _create_client(cls, settings: Settings) -> BaseOcrClient:
        provider = settings.ocr_provider.lower()
        if provider == "textract":
            return TextractOcrClient(region=settings.ocr_region or None)
        if provider == "disabled":
            return DisabledOcrClient()
        raise ValueError(f"Unknown OCR provider '{provider}'. Choose from: {list(cls.PROVIDERS)}")
