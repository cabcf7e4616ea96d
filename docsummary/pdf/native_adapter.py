"""Best-effort PDF text extraction without a PDF object-graph parser.

The file is scanned as one byte-per-character string so offsets line up with
the binary buffer. Every ``stream ... endstream`` payload is inflated when it
is FlateDecode (or used raw otherwise) and searched for literal strings, the
``( ... )`` operands of the text-showing operators. When no literal string is
found anywhere, printable ASCII runs of the whole file are used instead.

Only literal strings are understood: ``TJ`` arrays, hex strings and CID fonts
yield nothing here and are left to the quality gate and OCR. Streams are read
in byte-offset order, which is not reading order for multi-column layouts.
"""

import re
import zlib
from typing import ClassVar

from docsummary.pdf.base import BasePdfExtractor
from docsummary.pdf.exceptions import PdfExtractionError


class NativePdfExtractor(BasePdfExtractor):
    """Extracts literal-string text runs from PDF content streams."""

    STREAM_TOKEN: ClassVar[str] = "stream"
    END_STREAM_TOKEN: ClassVar[str] = "endstream"
    MAX_CHARS: ClassVar[int] = 12000

    _LITERAL_STRING_RE: ClassVar[re.Pattern[str]] = re.compile(r"\((?:\\.|[^\\)])*\)")
    _PRINTABLE_RUN_RE: ClassVar[re.Pattern[str]] = re.compile(r"[\x20-\x7E]{5,}")
    _WHITESPACE_RE: ClassVar[re.Pattern[str]] = re.compile(r"\s+", re.ASCII)
    _ESCAPES: ClassVar[tuple[tuple[str, str], ...]] = (
        ("\\n", " "),
        ("\\r", " "),
        ("\\t", " "),
        ("\\f", " "),
        ("\\\\", "\\"),
    )

    def __init__(self, max_chars: int = MAX_CHARS) -> None:
        self._max_chars = max_chars

    def extract(self, pdf_bytes: bytes) -> str:
        try:
            raw = pdf_bytes.decode("latin-1")
            parts = self._scan_streams(pdf_bytes, raw)
            if not parts:
                parts = self._scan_printable_runs(raw)
            return " ".join(parts)[: self._max_chars]
        except Exception as exc:
            raise PdfExtractionError(f"native extraction failed: {exc}") from exc

    def _scan_streams(self, pdf_bytes: bytes, raw: str) -> list[str]:
        parts: list[str] = []
        idx = 0
        while idx < len(raw):
            stream_pos = raw.find(self.STREAM_TOKEN, idx)
            if stream_pos == -1:
                break
            start = raw.find("\n", stream_pos)
            if start == -1:
                break
            end = raw.find(self.END_STREAM_TOKEN, start)
            if end == -1:
                break
            candidate = self._inflate(pdf_bytes[start + 1 : end])
            parts.extend(self._literal_strings(candidate))
            idx = end + len(self.END_STREAM_TOKEN)
        return parts

    @staticmethod
    def _inflate(payload: bytes) -> str:
        """Decompress a FlateDecode payload; anything else is returned as-is."""
        try:
            data = zlib.decompress(payload)
        except zlib.error:
            data = payload
        return data.decode("latin-1")

    def _literal_strings(self, candidate: str) -> list[str]:
        found: list[str] = []
        for match in self._LITERAL_STRING_RE.finditer(candidate):
            cleaned = self._clean_literal(match.group(0)[1:-1])
            if cleaned:
                found.append(cleaned)
        return found

    def _clean_literal(self, body: str) -> str:
        for escape, replacement in self._ESCAPES:
            body = body.replace(escape, replacement)
        return self._WHITESPACE_RE.sub(" ", body).strip()

    def _scan_printable_runs(self, raw: str) -> list[str]:
        runs: list[str] = []
        for match in self._PRINTABLE_RUN_RE.finditer(raw):
            cleaned = self._WHITESPACE_RE.sub(" ", match.group(0)).strip()
            if cleaned:
                runs.append(cleaned)
        return runs
