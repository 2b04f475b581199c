"""
News Digest - extractive multi-document news summarization.

This package turns a batch of short, already-cleaned news records into a
condensed summary using cross-article theme detection and near-duplicate
sentence removal.

Example:
    >>> from news_digest import NewsSummarizer
    >>> with NewsSummarizer() as summarizer:
    ...     result = summarizer.summarize(articles)
"""

__all__ = [
    "__version__",
    "NewsSummarizer",
    "Article",
    "Summary",
    "SummarizationFailure",
    "AppConfig",
    "load_config",
    "parse_articles",
]
__version__ = "0.1.0"

from .config import AppConfig, load_config
from .core.errors import SummarizationFailure
from .core.types import Article, Summary
from .input.json_parser import parse_articles
from .summarizer import NewsSummarizer
