import httpx
import openai

from docsummary.summarization.client_base import BaseGenerationClient, split_timeout
from docsummary.summarization.exceptions import (
    SummarizationError,
    SummarizationNetworkError,
    SummarizationTimeoutError,
    SummarizationUnavailableError,
)
from docsummary.summarization.models import Prompt


class OpenAIClientAdapter(BaseGenerationClient):
    """Chat-style generation client built on the OpenAI-compatible chat API."""

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: float,
        base_url: str | None = None,
    ) -> None:
        connect_seconds, read_seconds = split_timeout(timeout_seconds)
        self._client = openai.OpenAI(
            api_key=api_key,
            timeout=httpx.Timeout(read_seconds, connect=connect_seconds),
            base_url=base_url,
            max_retries=0,
        )

    def complete(
        self,
        *,
        model: str,
        prompt: Prompt,
        max_tokens: int,
        temperature: float,
    ) -> str:
        try:
            response = self._client.chat.completions.create(
                model=model,
                temperature=temperature,
                max_tokens=max_tokens,
                messages=[
                    {"role": "system", "content": prompt.system},
                    {"role": "user", "content": prompt.user},
                ],
            )
        except (openai.APITimeoutError, httpx.TimeoutException) as exc:
            raise SummarizationTimeoutError(f"AI provider timed out: {exc}") from exc
        except (openai.NotFoundError, openai.PermissionDeniedError) as exc:
            raise SummarizationUnavailableError(f"AI model unavailable: {exc}") from exc
        except (openai.APIConnectionError, httpx.ConnectError) as exc:
            raise SummarizationNetworkError(f"AI provider network error: {exc}") from exc
        except openai.APIError as exc:
            raise SummarizationNetworkError(f"AI provider API error: {exc}") from exc

        if not response.choices:
            raise SummarizationError("AI returned no choices")
        content = response.choices[0].message.content
        if content is None:
            raise SummarizationError("AI returned empty response")
        return content
