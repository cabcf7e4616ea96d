"""AI-powered document summarizer."""

from pathlib import Path

from docsummary.logging.logger import Log
from docsummary.processor.models import SummaryStyle
from docsummary.quality.scorer import score_text
from docsummary.summarization.base import BaseSummarizer
from docsummary.summarization.client_base import BaseGenerationClient
from docsummary.summarization.exceptions import LowConfidenceSummaryError, SummarizationError
from docsummary.summarization.models import Prompt
from docsummary.summarization.prompt_loader import load_prompt_templates, load_system_prompt


class Summarizer(BaseSummarizer):
    """Summarizes sanitized document text through a text generation provider."""

    def __init__(
        self,
        *,
        client: BaseGenerationClient,
        model: str,
        temperature: float = 0.3,
        max_tokens: int = 500,
        min_score: float = 0.10,
        prompt_dir: Path | None = None,
    ) -> None:
        self._client = client
        self._model = model
        self._temperature = max(0.0, min(1.0, temperature))
        self._max_tokens = max_tokens
        self._min_score = min_score
        self._templates = load_prompt_templates(prompt_dir)
        self._system_prompt = load_system_prompt(prompt_dir)

    @property
    def model(self) -> str:
        return self._model

    def summarize(self, text: str, style: SummaryStyle) -> str:
        prompt = self.build_prompt(text, style)
        Log.debug(f"Summarization prompt ({style.value}):\n{prompt.user}")

        raw_response = self._client.complete(
            model=self._model,
            prompt=prompt,
            max_tokens=self._max_tokens,
            temperature=self._temperature,
        )
        Log.debug(f"AI raw response:\n{raw_response}")

        summary = raw_response.strip()
        if not summary:
            raise SummarizationError("AI returned empty summary")
        quality = score_text(summary)
        if quality.score < self._min_score:
            raise LowConfidenceSummaryError(
                f"AI summary scored {quality.score:.2f} (min {self._min_score:.2f})"
            )

        Log.info(f"AI summary generated: {len(summary)} chars, score={quality.score:.2f}")
        return summary

    def build_prompt(self, text: str, style: SummaryStyle) -> Prompt:
        return Prompt(
            system=self._system_prompt,
            user=self._templates[style].format(content=text),
        )
