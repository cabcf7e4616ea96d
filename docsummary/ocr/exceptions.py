from docsummary.processor.exceptions import ExternalServiceDegradedError


class OcrError(ExternalServiceDegradedError):
    """Raised when the OCR service cannot recognize a document."""
