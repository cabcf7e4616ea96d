"""Example generation client adapter.

Use this module as a reference when implementing new provider adapters.
Implement BaseGenerationClient and register the provider in SummarizerFactory.
"""

from typing import ClassVar

from docsummary.summarization.client_base import BaseGenerationClient
from docsummary.summarization.models import Prompt


class ExampleClientAdapter(BaseGenerationClient):
    """Example adapter that returns a fixed summary.

    No network calls. Useful for local development and tests.
    """

    DEFAULT_RESPONSE: ClassVar[str] = (
        "This is an example summary generated without contacting a language model."
    )

    def complete(
        self,
        *,
        model: str,
        prompt: Prompt,
        max_tokens: int,
        temperature: float,
    ) -> str:
        _ = model, prompt, max_tokens, temperature
        return self.DEFAULT_RESPONSE
