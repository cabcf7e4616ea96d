"""Validates the raw request payload and builds a SummaryRequest."""

from collections.abc import Mapping
from typing import Any

from docsummary.processor.exceptions import InputValidationError
from docsummary.processor.models import Document, DocumentKind, SummaryRequest, SummaryStyle

_VALID_KINDS = frozenset(kind.value for kind in DocumentKind)


def parse_request(payload: Any) -> SummaryRequest:
    """Validate a caller payload and build a SummaryRequest.

    Expects ``type`` and ``content`` (non-empty strings), ``fileKey`` for
    files, and an optional ``summaryType``. Unknown summary types resolve to
    ``brief``.

    Raises:
        InputValidationError: on any missing or invalid field.
    """
    if not isinstance(payload, Mapping):
        raise InputValidationError("Request body must be a JSON object")
    _require_fields(payload)
    kind = _build_kind(payload["type"])
    document = Document(
        kind=kind,
        content=payload["content"],
        file_key=_build_file_key(payload.get("fileKey"), kind),
    )
    return SummaryRequest(
        document=document,
        style=SummaryStyle.resolve(payload.get("summaryType")),
    )


def _require_fields(payload: Mapping[str, Any]) -> None:
    missing = [
        name
        for name in ("type", "content")
        if not isinstance(payload.get(name), str) or not payload[name].strip()
    ]
    if missing:
        raise InputValidationError(
            f"type and content are required fields (missing: {', '.join(missing)})"
        )


def _build_kind(raw: str) -> DocumentKind:
    value = raw.strip().lower()
    if value not in _VALID_KINDS:
        raise InputValidationError(f'Invalid type. Must be "note" or "file", got {raw!r}')
    return DocumentKind(value)


def _build_file_key(raw: Any, kind: DocumentKind) -> str | None:
    if kind is DocumentKind.NOTE:
        return None
    if not isinstance(raw, str) or not raw.strip():
        raise InputValidationError("fileKey is required for file summarization")
    return raw.strip()
