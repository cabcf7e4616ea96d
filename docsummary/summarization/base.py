from abc import ABC, abstractmethod

from docsummary.processor.models import SummaryStyle


class BaseSummarizer(ABC):
    """Contract for AI summarizers: one call per request, style-driven prompt."""

    @property
    @abstractmethod
    def model(self) -> str:
        """Identifier of the model reported on AI results."""

    @abstractmethod
    def summarize(self, text: str, style: SummaryStyle) -> str:
        """Summarize *text* in the requested *style*.

        Raises:
            SummarizationError: on any failure, timeout or low-confidence output.
        """
