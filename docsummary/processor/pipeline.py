from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from docsummary.processor.models import LoadedContent, SummaryRequest, SummaryResult
from docsummary.quality.scorer import QualityScore


class SummaryState(str, Enum):
    """States of a single summarization request.

    LOADING, RECOGNIZING and SANITIZING are the sub-states of extraction.
    """

    PREPARING = "preparing"
    LOADING = "loading"
    EXTRACTING = "extracting"
    RECOGNIZING = "recognizing"
    SANITIZING = "sanitizing"
    GATING = "gating"
    TRUNCATING = "truncating"
    SUMMARIZING = "summarizing"
    FALLING_BACK = "falling_back"
    SUCCEEDED = "succeeded"
    UNREADABLE = "unreadable"


TERMINAL_STATES = frozenset({SummaryState.SUCCEEDED, SummaryState.UNREADABLE})


@dataclass(slots=True)
class PipelineContext:
    """Request-scoped data carried through the state machine."""

    payload: Mapping[str, Any]
    request_id: str
    state: SummaryState = SummaryState.PREPARING
    request: SummaryRequest | None = None
    content: LoadedContent | None = None
    extracted_text: str = ""
    text_source: str = ""
    sanitized_text: str = ""
    quality: QualityScore | None = None
    prompt_text: str = ""
    warning: str | None = None
    result: SummaryResult | None = None
    transitions: list[SummaryState] = field(default_factory=list)

    def advance(self, state: SummaryState) -> "PipelineContext":
        self.transitions.append(self.state)
        self.state = state
        return self


class PipelineStep(ABC):
    """Transition for one state: does the state's work and picks the next state."""

    @abstractmethod
    def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError
