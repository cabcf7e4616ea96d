class SummarizeError(Exception):
    """Base exception for all summarization-pipeline errors."""


class InputValidationError(SummarizeError):
    """Raised when the request is missing required fields or carries invalid values."""


class EmptyContentError(InputValidationError):
    """Raised when extraction produced no text at all."""


class ContentUnavailableError(SummarizeError):
    """Raised when the storage collaborator cannot supply the document bytes."""


class ExternalServiceDegradedError(SummarizeError):
    """Raised when an external service (OCR, text generation) fails.

    Always recovered inside the pipeline via the documented fallback.
    """
