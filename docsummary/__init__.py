"""Document text extraction and quality-gated summarization."""

__version__ = "0.1.0"
