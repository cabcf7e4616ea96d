from docsummary.logging.logger import Log
from docsummary.ocr.fallback import OcrFallbackAdapter
from docsummary.pdf.base import BasePdfExtractor
from docsummary.pdf.exceptions import PdfExtractionError
from docsummary.processor.content_loader import ContentLoader
from docsummary.processor.exceptions import EmptyContentError
from docsummary.processor.models import (
    ContainerKind,
    DocumentKind,
    SummaryRequest,
    SummaryResult,
    SummarySource,
)
from docsummary.processor.pipeline import PipelineContext, PipelineStep, SummaryState
from docsummary.processor.validator import parse_request
from docsummary.quality.sanitizer import sanitize
from docsummary.quality.scorer import score_text
from docsummary.summarization.base import BaseSummarizer
from docsummary.summarization.exceptions import (
    SummarizationError,
    SummarizationTimeoutError,
    SummarizationUnavailableError,
)
from docsummary.summarization.extractive import ExtractiveSummarizer

EMPTY_CONTENT_MESSAGE = (
    "Content is empty or invalid. PDF text extraction may have failed; "
    "try uploading a text file."
)
UNREADABLE_SUMMARY = (
    "Text not readable; PDF appears scanned or garbled. Please upload a clearer copy."
)
UNREADABLE_WARNING = "Unreadable text after extraction and cleaning"
TIMEOUT_WARNING = "AI summarization timed out; using fallback summarizer"
MODEL_UNAVAILABLE_WARNING = "AI model unavailable or not permitted; using fallback summarizer"
AI_UNAVAILABLE_WARNING = "AI summarization unavailable, using fallback summarizer"
NO_SUMMARY_MESSAGE = "Summary unavailable due to an unexpected error."
TRUNCATION_MARKER = "... (truncated)"


def _request(context: PipelineContext) -> SummaryRequest:
    if context.request is None:
        raise ValueError(f"PipelineContext.request must be set before {context.state.value}")
    return context.request


class PrepareStep(PipelineStep):
    def run(self, context: PipelineContext) -> PipelineContext:
        context.request = parse_request(context.payload)
        Log.info(
            f"Summarizing {context.request.document.kind.value} "
            f"as {context.request.style.value}"
        )
        return context.advance(SummaryState.LOADING)


class LoadContentStep(PipelineStep):
    def __init__(self, content_loader: ContentLoader) -> None:
        self._content_loader = content_loader

    def run(self, context: PipelineContext) -> PipelineContext:
        context.content = self._content_loader.load(_request(context).document)
        return context.advance(SummaryState.EXTRACTING)


class ExtractTextStep(PipelineStep):
    def __init__(self, pdf_extractor: BasePdfExtractor) -> None:
        self._pdf_extractor = pdf_extractor

    def run(self, context: PipelineContext) -> PipelineContext:
        request = _request(context)
        if context.content is None:
            raise ValueError("PipelineContext.content must be set before extraction")
        raw_bytes = context.content.raw_bytes
        if context.content.container is ContainerKind.PDF:
            try:
                context.extracted_text = self._pdf_extractor.extract(raw_bytes)
                context.text_source = "pdf"
            except PdfExtractionError as exc:
                Log.warning(f"PDF extraction failed, reading bytes as text: {exc}")
                context.extracted_text = raw_bytes.decode("utf-8", errors="replace")
                context.text_source = "text"
        else:
            context.extracted_text = raw_bytes.decode("utf-8", errors="replace")
            context.text_source = request.document.kind.value

        if not context.extracted_text.strip():
            raise EmptyContentError(EMPTY_CONTENT_MESSAGE)
        Log.info(f"Extracted {len(context.extracted_text)} chars ({context.text_source})")

        if request.document.kind is DocumentKind.FILE:
            return context.advance(SummaryState.RECOGNIZING)
        return context.advance(SummaryState.SANITIZING)


class OcrFallbackStep(PipelineStep):
    """Replaces low-quality extracted text with OCR output when OCR does better."""

    def __init__(
        self,
        ocr: OcrFallbackAdapter,
        score_threshold: float = 0.25,
        min_chars: int = 200,
    ) -> None:
        self._ocr = ocr
        self._score_threshold = score_threshold
        self._min_chars = min_chars

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.content is None:
            raise ValueError("PipelineContext.content must be set before OCR")
        native = score_text(context.extracted_text)
        length = len(context.extracted_text.strip())
        if native.score >= self._score_threshold and length >= self._min_chars:
            return context.advance(SummaryState.SANITIZING)

        Log.info(
            f"Low-quality text detected (score={native.score:.2f}, len={length}); "
            f"attempting OCR"
        )
        ocr_text = self._ocr.recognize(context.content.raw_bytes)
        if ocr_text.strip():
            recognized = score_text(ocr_text)
            if recognized.score >= self._score_threshold or recognized.score > native.score:
                context.extracted_text = ocr_text
                context.text_source = "ocr"
                Log.info(f"OCR text adopted: {len(ocr_text)} chars, score={recognized.score:.2f}")
            else:
                Log.info(f"OCR text discarded: score={recognized.score:.2f}")
        return context.advance(SummaryState.SANITIZING)


class SanitizeStep(PipelineStep):
    def run(self, context: PipelineContext) -> PipelineContext:
        context.sanitized_text = sanitize(context.extracted_text)
        Log.info(
            f"Sanitized {len(context.extracted_text)} -> {len(context.sanitized_text)} chars"
        )
        return context.advance(SummaryState.GATING)


class QualityGateStep(PipelineStep):
    """Short-circuits with an unreadable result when sanitized text is noise.

    The token minimum applies to files only: notes are user-typed and may be short.
    """

    def __init__(self, score_threshold: float = 0.10, min_tokens: int = 10) -> None:
        self._score_threshold = score_threshold
        self._min_tokens = min_tokens

    def run(self, context: PipelineContext) -> PipelineContext:
        request = _request(context)
        context.quality = score_text(context.sanitized_text)
        tokens = len(context.sanitized_text.split())
        too_short = request.document.kind is DocumentKind.FILE and tokens < self._min_tokens
        if context.quality.score >= self._score_threshold and not too_short:
            return context.advance(SummaryState.TRUNCATING)

        Log.warning(
            f"Unreadable text after cleaning (score={context.quality.score:.2f}, "
            f"tokens={tokens})"
        )
        context.result = SummaryResult(
            summary=UNREADABLE_SUMMARY,
            source=SummarySource.FALLBACK,
            original_length=len(context.sanitized_text),
            kind=request.document.kind,
            style=request.style,
            warning=UNREADABLE_WARNING,
        )
        return context.advance(SummaryState.UNREADABLE)


class TruncateStep(PipelineStep):
    def __init__(self, max_chars: int = 6000) -> None:
        self._max_chars = max_chars

    def run(self, context: PipelineContext) -> PipelineContext:
        text = context.sanitized_text
        if len(text) > self._max_chars:
            context.prompt_text = text[: self._max_chars] + TRUNCATION_MARKER
            Log.info(f"Truncated {len(text)} chars to {self._max_chars} for the prompt")
        else:
            context.prompt_text = text
        return context.advance(SummaryState.SUMMARIZING)


class SummarizeStep(PipelineStep):
    def __init__(self, summarizer: BaseSummarizer) -> None:
        self._summarizer = summarizer

    def run(self, context: PipelineContext) -> PipelineContext:
        request = _request(context)
        try:
            summary = self._summarizer.summarize(context.prompt_text, request.style)
        except SummarizationTimeoutError as exc:
            return self._fall_back(context, exc, TIMEOUT_WARNING)
        except SummarizationUnavailableError as exc:
            return self._fall_back(context, exc, MODEL_UNAVAILABLE_WARNING)
        except SummarizationError as exc:
            return self._fall_back(context, exc, AI_UNAVAILABLE_WARNING)

        context.result = SummaryResult(
            summary=summary,
            source=SummarySource.AI,
            original_length=len(context.sanitized_text),
            kind=request.document.kind,
            style=request.style,
            model=self._summarizer.model,
        )
        return context.advance(SummaryState.SUCCEEDED)

    @staticmethod
    def _fall_back(
        context: PipelineContext,
        exc: SummarizationError,
        warning: str,
    ) -> PipelineContext:
        Log.warning(f"AI summarization failed, using fallback summarizer: {exc}")
        context.warning = warning
        return context.advance(SummaryState.FALLING_BACK)


class FallbackSummaryStep(PipelineStep):
    """Builds the extractive summary from the untruncated sanitized text."""

    def __init__(self, extractive: ExtractiveSummarizer) -> None:
        self._extractive = extractive

    def run(self, context: PipelineContext) -> PipelineContext:
        request = _request(context)
        summary = self._extractive.summarize(context.sanitized_text)
        context.result = SummaryResult(
            summary=summary or NO_SUMMARY_MESSAGE,
            source=SummarySource.FALLBACK,
            original_length=len(context.sanitized_text),
            kind=request.document.kind,
            style=request.style,
            warning=context.warning or AI_UNAVAILABLE_WARNING,
        )
        return context.advance(SummaryState.SUCCEEDED)
