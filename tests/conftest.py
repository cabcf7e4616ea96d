import zlib
from collections.abc import Callable

import pytest

PROSE = (
    "The quarterly operations report describes how the regional support team "
    "reduced average response times. It explains the new escalation process, "
    "lists the staffing changes made in March, and outlines the training plan "
    "for the next quarter. Managers should review the attached budget before "
    "the planning meeting."
)


def build_pdf(*contents: bytes, compress: bool = True) -> bytes:
    """Assemble a minimal PDF with one stream object per content."""
    parts = [b"%PDF-1.4\n"]
    for number, content in enumerate(contents, start=1):
        payload = zlib.compress(content) if compress else content
        filters = b" /Filter /FlateDecode" if compress else b""
        parts.append(
            b"%d 0 obj\n<< /Length %d%s >>\nstream\n" % (number, len(payload), filters)
            + payload
            + b"\nendstream\nendobj\n"
        )
    parts.append(b"trailer\n<< /Root 1 0 R >>\n%%EOF\n")
    return b"".join(parts)


def show_text(*runs: str) -> bytes:
    """Content stream drawing each run with the Tj operator."""
    body = " ".join(f"({run}) Tj" for run in runs)
    return f"BT /F1 12 Tf 72 720 Td {body} ET".encode("latin-1")


@pytest.fixture()
def make_pdf() -> Callable[..., bytes]:
    return build_pdf


@pytest.fixture()
def make_content_stream() -> Callable[..., bytes]:
    return show_text


@pytest.fixture()
def prose() -> str:
    return PROSE


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Single FlateDecode page whose text is readable prose."""
    sentences = [sentence.strip() + "." for sentence in PROSE.split(".") if sentence.strip()]
    return build_pdf(show_text(*sentences))


@pytest.fixture()
def multi_stream_pdf_bytes() -> bytes:
    return build_pdf(show_text("Quarterly report"), show_text("Revenue grew"))


@pytest.fixture()
def scanned_pdf_bytes() -> bytes:
    """Valid PDF whose only text is a scanner label; the page itself is an image."""
    return build_pdf(show_text("Scan 001"))


@pytest.fixture()
def empty_pdf_bytes() -> bytes:
    """PDF header with no streams and no printable runs."""
    return b"%PDF\x00\x01\x02\x03"
