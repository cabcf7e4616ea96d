"""Heuristic confidence that a text blob is readable English prose.

Each sub-score is a pure function in [0, 1] so thresholds can be tuned
independently of extraction and sanitization.
"""

import re
from dataclasses import dataclass

_LETTER_RE = re.compile(r"[A-Za-z]")
_VOWEL_RE = re.compile(r"[AEIOUaeiou]")

LETTERS_WEIGHT = 0.5
VOWELS_WEIGHT = 0.3
WORDS_WEIGHT = 0.2
SATURATION_WORDS = 80


@dataclass(frozen=True)
class QualityScore:
    """Composite readability score with its components."""

    score: float
    letters_ratio: float
    vowel_ratio: float
    word_score: float
    words: int


def letters_ratio(text: str) -> float:
    """Share of characters that are ASCII letters."""
    if not text:
        return 0.0
    return len(_LETTER_RE.findall(text)) / len(text)


def vowel_ratio(text: str) -> float:
    """Share of ASCII letters that are vowels; 0 when there are no letters."""
    letters = len(_LETTER_RE.findall(text))
    if letters == 0:
        return 0.0
    return len(_VOWEL_RE.findall(text)) / letters


def word_score(text: str) -> float:
    """Whitespace-delimited word count, saturating at SATURATION_WORDS."""
    return min(len(text.split()) / SATURATION_WORDS, 1.0)


def score_text(text: str) -> QualityScore:
    """Score *text*; empty or whitespace-only text scores 0."""
    stripped = text.strip()
    if not stripped:
        return QualityScore(score=0.0, letters_ratio=0.0, vowel_ratio=0.0, word_score=0.0, words=0)
    letters = letters_ratio(stripped)
    vowels = vowel_ratio(stripped)
    words = word_score(stripped)
    composite = LETTERS_WEIGHT * letters + VOWELS_WEIGHT * vowels + WORDS_WEIGHT * words
    return QualityScore(
        score=max(0.0, min(1.0, composite)),
        letters_ratio=letters,
        vowel_ratio=vowels,
        word_score=words,
        words=len(stripped.split()),
    )
