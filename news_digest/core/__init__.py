"""
Core domain models and summarization building blocks.

This package contains the data types, caches, worker pool and text
algorithms that the summarizer composes.
"""

from .types import Article, ArticleProcessingResult, Summary, FALLBACK_TEXT
from .errors import (
    DigestError,
    ErrorKind,
    ExtractionError,
    SimilarityError,
    SummarizationFailure,
    ValidationError,
)
from .cache import FifoCache
from .dedup import Deduplicator
from .metrics import Metrics
from .phrases import STOPWORDS, extract_phrases, split_sentences, tokenize
from .pool import WorkerPool
from .similarity import SimilarityEngine
from .themes import ThemeDetector, rank_themes

__all__ = [
    "Article",
    "ArticleProcessingResult",
    "Summary",
    "FALLBACK_TEXT",
    "DigestError",
    "ErrorKind",
    "ExtractionError",
    "SimilarityError",
    "SummarizationFailure",
    "ValidationError",
    "FifoCache",
    "Deduplicator",
    "Metrics",
    "STOPWORDS",
    "extract_phrases",
    "split_sentences",
    "tokenize",
    "WorkerPool",
    "SimilarityEngine",
    "ThemeDetector",
    "rank_themes",
]
