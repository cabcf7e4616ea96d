"""Strips control and non-ASCII noise and drops tokens that look like encoding debris.

The vowel filter is tuned for English and will also discard long acronyms,
vowel-less transliterations and most non-Latin content.
"""

import re

MAX_CHARS = 12000
MAX_TOKEN_CHARS = 60
MAX_VOWELLESS_TOKEN_CHARS = 5

_NON_PRINTABLE_RE = re.compile(r"[^\x20-\x7E]+")
_WHITESPACE_RE = re.compile(r"\s+")
_LETTER_RE = re.compile(r"[A-Za-z]")
_VOWEL_RE = re.compile(r"[AEIOUaeiou]")


def sanitize(text: str, max_chars: int = MAX_CHARS) -> str:
    """Return *text* reduced to plausible ASCII words, capped at *max_chars*.

    The cap cuts on a token boundary so a second pass returns the same text.
    """
    cleaned = _WHITESPACE_RE.sub(" ", _NON_PRINTABLE_RE.sub(" ", text)).strip()
    kept = [token for token in cleaned.split(" ") if _keep_token(token)]
    return _cap(" ".join(kept), max_chars)


def _keep_token(token: str) -> bool:
    if not _LETTER_RE.search(token):
        return False
    if len(token) > MAX_VOWELLESS_TOKEN_CHARS and not _VOWEL_RE.search(token):
        return False
    return len(token) <= MAX_TOKEN_CHARS


def _cap(text: str, max_chars: int) -> str:
    if len(text) <= max_chars:
        return text
    head = text[: max_chars + 1]
    cut = head.rfind(" ")
    return head[:cut] if cut > 0 else text[:max_chars]
