from docsummary.processor.exceptions import ExternalServiceDegradedError


class PromptTemplateError(Exception):
    """Raised when bundled or configured prompt templates cannot be loaded."""


class SummarizationError(ExternalServiceDegradedError):
    """Raised when AI summarization fails or yields unusable output."""


class SummarizationNetworkError(SummarizationError):
    """Raised when the AI provider call fails due to network/infrastructure issues."""


class SummarizationTimeoutError(SummarizationNetworkError):
    """Raised when the AI provider call exceeds its time budget and is aborted."""


class SummarizationUnavailableError(SummarizationError):
    """Raised when the configured model does not exist or is not permitted."""


class LowConfidenceSummaryError(SummarizationError):
    """Raised when the AI output does not look like readable prose."""
