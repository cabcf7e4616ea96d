from docsummary.summarization.base import BaseSummarizer
from docsummary.summarization.extractive import ExtractiveSummarizer
from docsummary.summarization.factory import SummarizerFactory
from docsummary.summarization.summarizer import Summarizer

__all__ = ["BaseSummarizer", "ExtractiveSummarizer", "Summarizer", "SummarizerFactory"]
