from pathlib import Path

from docsummary.processor.models import SummaryStyle
from docsummary.summarization.exceptions import PromptTemplateError

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"
CONTENT_PLACEHOLDER = "{content}"


def load_prompt_template(style: SummaryStyle, prompt_dir: Path | None = None) -> str:
    """Load the prompt template for one summary style.

    Args:
        style: Summary style; the template file is ``<style>.txt``.
        prompt_dir: Directory holding the templates.
                    Defaults to the bundled prompts directory.

    Returns:
        The raw template string with a ``{content}`` placeholder.

    Raises:
        PromptTemplateError: if the file cannot be read or lacks the placeholder.
    """
    path = (prompt_dir or _DEFAULT_PROMPT_DIR) / f"{style.value}.txt"
    template = _read(path, "prompt template")
    if CONTENT_PLACEHOLDER not in template:
        raise PromptTemplateError(f"Prompt template {path} has no {CONTENT_PLACEHOLDER} placeholder")
    return template


def load_prompt_templates(prompt_dir: Path | None = None) -> dict[SummaryStyle, str]:
    """Load the templates for every summary style."""
    return {style: load_prompt_template(style, prompt_dir) for style in SummaryStyle}


def load_system_prompt(prompt_dir: Path | None = None) -> str:
    """Load the system prompt sent to chat-style providers."""
    return _read((prompt_dir or _DEFAULT_PROMPT_DIR) / "system.txt", "system prompt").strip()


def _read(path: Path, label: str) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise PromptTemplateError(f"Failed to load {label}: {exc}") from exc
