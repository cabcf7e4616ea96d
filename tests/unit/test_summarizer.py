from pathlib import Path
from unittest.mock import MagicMock

import pytest

from docsummary.processor.models import SummaryStyle
from docsummary.summarization.client_base import BaseGenerationClient
from docsummary.summarization.exceptions import (
    LowConfidenceSummaryError,
    SummarizationError,
    SummarizationTimeoutError,
)
from docsummary.summarization.models import Prompt
from docsummary.summarization.summarizer import Summarizer


def _make_summarizer(response: str = "The report covers quarterly results.", **kwargs: object) -> tuple[Summarizer, MagicMock]:
    client = MagicMock(spec=BaseGenerationClient)
    client.complete.return_value = response
    summarizer = Summarizer(client=client, model="test-model", **kwargs)  # type: ignore[arg-type]
    return summarizer, client


class TestSummarizer:
    def test_returns_trimmed_summary(self) -> None:
        summarizer, _ = _make_summarizer("  The report covers quarterly results.\n")
        assert summarizer.summarize("text", SummaryStyle.BRIEF) == "The report covers quarterly results."

    def test_exposes_model(self) -> None:
        summarizer, _ = _make_summarizer()
        assert summarizer.model == "test-model"

    def test_calls_client_with_settings(self) -> None:
        summarizer, client = _make_summarizer(max_tokens=321, temperature=0.5)
        summarizer.summarize("Quarterly text", SummaryStyle.DETAILED)
        kwargs = client.complete.call_args.kwargs
        assert kwargs["model"] == "test-model"
        assert kwargs["max_tokens"] == 321
        assert kwargs["temperature"] == 0.5
        assert isinstance(kwargs["prompt"], Prompt)
        assert "Quarterly text" in kwargs["prompt"].user

    def test_clamps_temperature(self) -> None:
        summarizer, client = _make_summarizer(temperature=3.0)
        summarizer.summarize("text", SummaryStyle.BRIEF)
        assert client.complete.call_args.kwargs["temperature"] == 1.0

    def test_uses_style_template(self, tmp_path: Path) -> None:
        for style in SummaryStyle:
            (tmp_path / f"{style.value}.txt").write_text(f"[{style.value}] {{content}}")
        (tmp_path / "system.txt").write_text("system\n")
        summarizer, _ = _make_summarizer(prompt_dir=tmp_path)
        prompt = summarizer.build_prompt("body", SummaryStyle.SENTIMENT)
        assert prompt == Prompt(system="system", user="[sentiment] body")

    def test_content_with_braces_is_inserted_verbatim(self) -> None:
        summarizer, _ = _make_summarizer()
        prompt = summarizer.build_prompt("uses {curly} braces", SummaryStyle.BRIEF)
        assert "uses {curly} braces" in prompt.user

    def test_empty_response_raises(self) -> None:
        summarizer, _ = _make_summarizer("   \n")
        with pytest.raises(SummarizationError, match="empty summary"):
            summarizer.summarize("text", SummaryStyle.BRIEF)

    def test_garbled_response_raises_low_confidence(self) -> None:
        summarizer, _ = _make_summarizer("### 1234 %%% 5678")
        with pytest.raises(LowConfidenceSummaryError):
            summarizer.summarize("text", SummaryStyle.BRIEF)

    def test_unreadable_reply_passes_through(self) -> None:
        summarizer, _ = _make_summarizer("Text not readable")
        assert summarizer.summarize("text", SummaryStyle.BRIEF) == "Text not readable"

    def test_client_errors_propagate(self) -> None:
        summarizer, client = _make_summarizer()
        client.complete.side_effect = SummarizationTimeoutError("slow")
        with pytest.raises(SummarizationTimeoutError):
            summarizer.summarize("text", SummaryStyle.BRIEF)
