from abc import ABC, abstractmethod

from docsummary.summarization.models import Prompt

CONNECT_TIMEOUT_SHARE = 0.25


def split_timeout(total_seconds: float) -> tuple[float, float]:
    """Split one call budget into (connect, read) timeouts that sum to it.

    Transports time each phase separately; together the phases stay within
    *total_seconds*.
    """
    connect = total_seconds * CONNECT_TIMEOUT_SHARE
    return connect, total_seconds - connect


class BaseGenerationClient(ABC):
    """Contract for provider-specific text generation clients.

    Implementations are constructed with a bounded timeout and no automatic
    retries; a timed-out call must abort the underlying network request.
    """

    @abstractmethod
    def complete(
        self,
        *,
        model: str,
        prompt: Prompt,
        max_tokens: int,
        temperature: float,
    ) -> str:
        """Return the generated text as plain text.

        Raises:
            SummarizationTimeoutError: if the call exceeded its timeout.
            SummarizationUnavailableError: if the model is missing or not permitted.
            SummarizationNetworkError: on any other transport or API failure.
            SummarizationError: if the provider returned no text.
        """
