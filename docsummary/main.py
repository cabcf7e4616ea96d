from collections.abc import Mapping
from typing import Any

from docsummary.config.settings import Settings
from docsummary.logging.logger import Log
from docsummary.processor.processor import Processor, build_processor

_processor: Processor | None = None


def init_processor(settings: Settings | None = None) -> Processor:
    """Build the process-wide processor from settings, configuring logging once."""
    global _processor  # noqa: PLW0603
    settings = settings if settings is not None else Settings()
    Log.configure(settings.log_level)
    _processor = build_processor(settings)
    return _processor


def reset_processor() -> None:
    global _processor  # noqa: PLW0603
    _processor = None


def handle(payload: Mapping[str, Any]) -> dict[str, object]:
    """Entry point: summarize one request payload and return the response body.

    Raises:
        InputValidationError: if the payload is invalid or yields no text.
        ContentUnavailableError: if the referenced file cannot be loaded.
    """
    processor = _processor if _processor is not None else init_processor()
    return processor.summarize(payload).to_dict()
