import math
import re

_SENTENCE_BOUNDARY_RE = re.compile(r"[.!?]+")


class ExtractiveSummarizer:
    """Deterministic fallback summary built from verbatim leading sentences.

    Text that holds no more sentences than the cap is returned whole. Longer
    text drops fragments shorter than ``min_sentence_chars`` and keeps the
    first third of what remains, between one sentence and the cap.
    """

    def __init__(self, min_sentence_chars: int = 10, max_sentences: int = 5) -> None:
        self._min_sentence_chars = min_sentence_chars
        self._max_sentences = max_sentences

    def summarize(self, text: str, max_sentences: int | None = None) -> str:
        """Return the extractive summary of *text*, or "" when it has no sentences."""
        limit = max_sentences if max_sentences is not None else self._max_sentences
        fragments = self._fragments(text)
        if not fragments:
            return ""
        if len(fragments) <= limit:
            selected = fragments
        else:
            sentences = self._long_enough(fragments) or fragments
            count = min(limit, max(1, math.ceil(len(sentences) / 3)))
            selected = sentences[:count]
        return self._join(selected)

    def leading_sentences(self, text: str, count: int) -> str:
        """Return the first *count* sentences of at least ``min_sentence_chars``, or ""."""
        selected = self._long_enough(self._fragments(text))[:count]
        return self._join(selected) if selected else ""

    @staticmethod
    def _fragments(text: str) -> list[str]:
        return [part.strip() for part in _SENTENCE_BOUNDARY_RE.split(text) if part.strip()]

    def _long_enough(self, fragments: list[str]) -> list[str]:
        return [f for f in fragments if len(f) >= self._min_sentence_chars]

    @staticmethod
    def _join(sentences: list[str]) -> str:
        return ". ".join(sentences) + "."
