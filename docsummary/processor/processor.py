import time
import uuid
from collections.abc import Mapping
from typing import Any

from docsummary.config.settings import Settings
from docsummary.logging.logger import Log
from docsummary.ocr.factory import OcrFactory
from docsummary.pdf.native_adapter import NativePdfExtractor
from docsummary.processor.content_loader import ContentLoader
from docsummary.processor.exceptions import ContentUnavailableError, InputValidationError
from docsummary.processor.models import SummaryResult, SummarySource, SummaryStyle
from docsummary.processor.pipeline import (
    TERMINAL_STATES,
    PipelineContext,
    PipelineStep,
    SummaryState,
)
from docsummary.processor.steps import (
    NO_SUMMARY_MESSAGE,
    ExtractTextStep,
    FallbackSummaryStep,
    LoadContentStep,
    OcrFallbackStep,
    PrepareStep,
    QualityGateStep,
    SanitizeStep,
    SummarizeStep,
    TruncateStep,
)
from docsummary.quality.sanitizer import sanitize
from docsummary.storage.base import BaseObjectStorage
from docsummary.storage.factory import StorageFactory
from docsummary.summarization.extractive import ExtractiveSummarizer
from docsummary.summarization.factory import SummarizerFactory


class Processor:
    """Runs one summarization request through the state machine.

    PREPARING -> LOADING -> EXTRACTING -> [RECOGNIZING] -> SANITIZING -> GATING
    -> UNREADABLE, or TRUNCATING -> SUMMARIZING -> [FALLING_BACK] -> SUCCEEDED.

    Validation and storage failures propagate to the caller. Any other error
    is converted into a fallback summary of whatever text exists so far.
    """

    RECOVERY_SENTENCES = 3

    def __init__(
        self,
        steps: Mapping[SummaryState, PipelineStep],
        extractive: ExtractiveSummarizer,
    ) -> None:
        self._steps = dict(steps)
        self._extractive = extractive

    def summarize(self, payload: Mapping[str, Any]) -> SummaryResult:
        """Summarize one request payload.

        Raises:
            InputValidationError: if the payload is invalid or no text could be extracted.
            ContentUnavailableError: if the file bytes could not be loaded.
        """
        request_id = uuid.uuid4().hex
        token = Log.bind_request(request_id)
        context = PipelineContext(payload=payload, request_id=request_id)
        started = time.monotonic()
        try:
            try:
                result = self._run(context)
            except (InputValidationError, ContentUnavailableError) as exc:
                Log.warning(f"Request rejected while {context.state.value}: {exc}")
                raise
            except Exception as exc:
                Log.exception(f"Unexpected error while {context.state.value}: {exc}")
                result = self._recover(context)
            Log.info(f"Summary source: {result.source.value}")
            return result
        finally:
            duration_ms = (time.monotonic() - started) * 1000
            Log.info(f"Request finished in {duration_ms:.0f}ms ({context.state.value})")
            Log.release_request(token)

    def _run(self, context: PipelineContext) -> SummaryResult:
        while context.state not in TERMINAL_STATES:
            state = context.state
            step = self._steps.get(state)
            if step is None:
                raise RuntimeError(f"No pipeline step registered for state {state.value}")
            context = step.run(context)
            if context.state is state:
                raise RuntimeError(f"Pipeline step for {state.value} did not advance")
        if context.result is None:
            raise RuntimeError(f"Terminal state {context.state.value} reached without a result")
        return context.result

    def _recover(self, context: PipelineContext) -> SummaryResult:
        text = context.sanitized_text or sanitize(context.extracted_text)
        summary = self._extractive.leading_sentences(text, self.RECOVERY_SENTENCES)
        request = context.request
        return SummaryResult(
            summary=summary or NO_SUMMARY_MESSAGE,
            source=SummarySource.FALLBACK,
            original_length=len(text),
            kind=request.document.kind if request is not None else None,
            style=request.style if request is not None else SummaryStyle.BRIEF,
            warning=(
                f"Unexpected error (requestId={context.request_id}). "
                f"AI summarization unavailable."
            ),
        )


def build_processor(
    settings: Settings,
    storage: BaseObjectStorage | None = None,
) -> Processor:
    """Build a Processor with all required adapters."""
    content_loader = ContentLoader(storage if storage is not None else StorageFactory.create(settings))
    extractive = ExtractiveSummarizer(
        min_sentence_chars=settings.fallback_min_sentence_chars,
        max_sentences=settings.fallback_max_sentences,
    )
    steps: dict[SummaryState, PipelineStep] = {
        SummaryState.PREPARING: PrepareStep(),
        SummaryState.LOADING: LoadContentStep(content_loader),
        SummaryState.EXTRACTING: ExtractTextStep(NativePdfExtractor()),
        SummaryState.RECOGNIZING: OcrFallbackStep(
            OcrFactory.create(settings),
            score_threshold=settings.ocr_score_threshold,
            min_chars=settings.ocr_min_chars,
        ),
        SummaryState.SANITIZING: SanitizeStep(),
        SummaryState.GATING: QualityGateStep(
            score_threshold=settings.unreadable_score_threshold,
            min_tokens=settings.unreadable_min_tokens,
        ),
        SummaryState.TRUNCATING: TruncateStep(max_chars=settings.max_content_chars),
        SummaryState.SUMMARIZING: SummarizeStep(SummarizerFactory.create(settings)),
        SummaryState.FALLING_BACK: FallbackSummaryStep(extractive),
    }
    return Processor(steps=steps, extractive=extractive)
