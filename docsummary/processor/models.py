from dataclasses import dataclass
from enum import Enum


class DocumentKind(str, Enum):
    NOTE = "note"
    FILE = "file"


class ContainerKind(str, Enum):
    """Classification of loaded bytes, derived by signature sniffing."""

    PDF = "pdf"
    OPAQUE = "opaque"


class SummaryStyle(str, Enum):
    BRIEF = "brief"
    DETAILED = "detailed"
    BULLET = "bullet"
    SENTIMENT = "sentiment"
    TECHNICAL = "technical"

    @classmethod
    def resolve(cls, value: object) -> "SummaryStyle":
        """Map a requested style name to a style, defaulting to BRIEF."""
        if isinstance(value, str):
            for style in cls:
                if style.value == value.strip().lower():
                    return style
        return cls.BRIEF


class SummarySource(str, Enum):
    AI = "ai"
    FALLBACK = "fallback"


@dataclass(frozen=True)
class Document:
    """Input unit: a note's literal text or a storage reference to a file."""

    kind: DocumentKind
    content: str
    file_key: str | None = None


@dataclass(frozen=True)
class SummaryRequest:
    document: Document
    style: SummaryStyle = SummaryStyle.BRIEF


@dataclass(frozen=True)
class LoadedContent:
    """Raw bytes of a document together with their container classification."""

    raw_bytes: bytes
    container: ContainerKind


@dataclass(frozen=True)
class SummaryResult:
    """Outcome of one summarization request."""

    summary: str
    source: SummarySource
    original_length: int
    kind: DocumentKind | None = None
    style: SummaryStyle = SummaryStyle.BRIEF
    model: str | None = None
    warning: str | None = None

    def to_dict(self) -> dict[str, object]:
        """Serialize to the caller-facing payload; optional keys are omitted when unset."""
        payload: dict[str, object] = {
            "summary": self.summary,
            "source": self.source.value,
            "originalLength": self.original_length,
            "type": self.kind.value if self.kind is not None else None,
            "summaryType": self.style.value,
        }
        if self.model is not None:
            payload["model"] = self.model
        if self.warning is not None:
            payload["warning"] = self.warning
        return payload
