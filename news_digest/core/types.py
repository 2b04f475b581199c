"""
Core data types for the news digest engine.

This module defines the data structures that flow through summarization:
- Article: A cleaned news record handed over by the upstream source provider
- ArticleProcessingResult: Per-article sentences and key points (transient)
- Summary: The immutable record returned by the engine, full or fallback
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


FALLBACK_TEXT = "Unable to generate summary at this time."


@dataclass(frozen=True)
class Article:
    """A news record as delivered by the source provider.

    Attributes:
        title: The article headline
        snippet: Short plain-text body, HTML already stripped
        source: The publication name (e.g., "F1 News")
        publish_date: Optional ISO 8601 publish timestamp
        url: Optional link to the original article
    """
    title: str | None
    snippet: str | None
    source: str | None
    publish_date: str | None = None
    url: str | None = None

    def is_valid(self) -> bool:
        """True when title, snippet and source are non-blank strings."""
        return all(
            isinstance(value, str) and value.strip()
            for value in (self.title, self.snippet, self.source)
        )


@dataclass
class ArticleProcessingResult:
    """Output of processing one valid article during a summarize call.

    Attributes:
        source: Publication name of the article
        sentences: Snippet sentences left after near-duplicate removal, in order
        key_points: Extracted phrases of the snippet that are not themes
    """
    source: str
    sentences: list[str] = field(default_factory=list)
    key_points: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class Summary:
    """Result of a summarize call.

    A full summary carries the composed text, ranked themes, the confidence
    score and a metrics snapshot. A fallback summary carries the fixed
    fallback text with zero confidence and, depending on why it was
    produced, an error message or the partial-data counters.

    Attributes:
        summary: Newline-joined summary text, or the fallback text
        themes: Ranked cross-article phrases
        confidence: Ratio of processed to valid articles, in [0, 1]
        processed_articles: Articles successfully processed
        total_articles: Valid articles considered
        metrics: Snapshot of engine metrics (full summaries only)
        error: Reason for a fallback, if any
        partial_data: True when the fallback was caused by low confidence
    """
    summary: str
    themes: tuple[str, ...] = ()
    confidence: float = 0.0
    processed_articles: int | None = None
    total_articles: int | None = None
    metrics: dict[str, float] | None = None
    error: str | None = None
    partial_data: bool = False

    @classmethod
    def fallback(cls, **kwargs: Any) -> "Summary":
        return cls(summary=FALLBACK_TEXT, themes=(), confidence=0.0, **kwargs)

    @property
    def is_fallback(self) -> bool:
        return self.metrics is None

    def to_dict(self) -> dict[str, Any]:
        """Render the external result shape expected by API consumers."""
        payload: dict[str, Any] = {
            "summary": self.summary,
            "themes": list(self.themes),
            "confidence": self.confidence,
        }
        if self.error is not None:
            payload["error"] = self.error
        if self.partial_data:
            payload["partialData"] = True
        if self.processed_articles is not None:
            payload["processedArticles"] = self.processed_articles
        if self.total_articles is not None:
            payload["totalArticles"] = self.total_articles
        if self.metrics is not None:
            payload["metrics"] = dict(self.metrics)
        return payload
