"""
Extractive multi-document summarization.

This module coordinates a summarize call:
1. Validate articles and drop the invalid ones
2. Detect themes shared across articles
3. Process each article concurrently (sentence dedup + key phrases)
4. Score confidence and fall back when too few articles survived
5. Compose the summary text

Phrase extraction runs on a fixed worker pool and is memoized; the caches
and metrics belong to the engine and are only touched from the event loop.
"""

from __future__ import annotations

import asyncio
from collections.abc import Mapping, Sequence
import logging
import time
from typing import Any

from .config import AppConfig, get_worker_count
from .core.cache import FifoCache
from .core.dedup import Deduplicator
from .core.errors import ExtractionError, SummarizationFailure, ValidationError
from .core.metrics import Metrics
from .core.phrases import extract_phrases, freeze_stopwords, split_sentences
from .core.pool import WorkerPool
from .core.similarity import SimilarityEngine
from .core.themes import ThemeDetector
from .core.types import Article, ArticleProcessingResult, Summary
from .input.json_parser import to_article
from .logging_utils import get_logger, log_event, setup_logging


class PhraseExtractor:
    """Memoized phrase extraction dispatched to the worker pool.

    The cache key is the first ``key_chars`` characters of the text. Each
    entry also stores the full text, and a hit is only served when the full
    text matches, so two texts sharing a prefix never share phrases.

    Attributes:
        pool: Worker pool running extraction jobs
        cache: FIFO cache of (text, phrases) entries
    """

    def __init__(
        self,
        pool: WorkerPool,
        stopwords: frozenset[str],
        width: int = 3,
        capacity: int = 1000,
        key_chars: int = 100,
        metrics: Metrics | None = None,
        logger: logging.Logger | None = None,
    ):
        self.pool = pool
        self.stopwords = stopwords
        self.width = width
        self.key_chars = key_chars
        self.cache: FifoCache[str, tuple[str, tuple[str, ...]]] = FifoCache(capacity)
        self.metrics = metrics or Metrics()
        self.logger = logger or get_logger()

    async def extract(self, text: Any) -> list[str]:
        """Return the phrases of ``text``, or an empty list if extraction fails."""
        try:
            return await self._extract(text)
        except ExtractionError as exc:
            log_event(
                self.logger,
                "Key phrase extraction failed",
                level=logging.WARNING,
                event="extraction_failed",
                error=exc.message,
                kind=exc.kind.value,
            )
            return []

    async def _extract(self, text: Any) -> list[str]:
        if not isinstance(text, str) or not text:
            raise ExtractionError("Invalid input text for key phrase extraction")

        key = text[: self.key_chars]
        cached = self.cache.get(key)
        if cached is not None and cached[0] == text:
            self.metrics.record_hit()
            return list(cached[1])

        self.metrics.record_miss()
        with self.metrics.timer("phrase_extraction_time"):
            try:
                future = self.pool.submit(extract_phrases, text, self.stopwords, self.width)
                phrases = await asyncio.wrap_future(future)
            except Exception as exc:  # noqa: BLE001
                raise ExtractionError(str(exc) or type(exc).__name__) from exc

        self.cache.put(key, (text, tuple(phrases)))
        return list(phrases)

    def clear(self) -> None:
        self.cache.clear()


class NewsSummarizer:
    """Summarizes batches of news articles.

    The worker pool is created with the engine and released by ``close``,
    which must be called once when the engine is no longer needed (or use
    the engine as a context manager).

    Example:
        with NewsSummarizer() as summarizer:
            result = summarizer.summarize(articles)
            print(result.summary)
    """

    def __init__(
        self,
        cfg: AppConfig | None = None,
        logger: logging.Logger | None = None,
        pool: WorkerPool | None = None,
    ):
        self.cfg = cfg or AppConfig()
        self.logger = logger or setup_logging(self.cfg.logging)
        self.metrics = Metrics()
        self.pool = pool or WorkerPool(get_worker_count(self.cfg.engine))
        self.extractor = PhraseExtractor(
            self.pool,
            freeze_stopwords(self.cfg.extract.stopwords),
            width=self.cfg.extract.phrase_width,
            capacity=self.cfg.cache.capacity,
            key_chars=self.cfg.cache.phrase_key_chars,
            metrics=self.metrics,
            logger=self.logger,
        )
        self.similarity = SimilarityEngine(
            threshold=self.cfg.engine.similarity_threshold,
            capacity=self.cfg.cache.capacity,
            metrics=self.metrics,
            logger=self.logger,
        )
        self.deduplicator = Deduplicator(
            self.similarity,
            batch_size=self.cfg.summary.dedup_batch_size,
            metrics=self.metrics,
        )
        self.theme_detector = ThemeDetector(self.extractor.extract, metrics=self.metrics)
        self._closed = False

    def __enter__(self) -> "NewsSummarizer":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        """Shut down the worker pool and clear both caches."""
        if self._closed:
            return
        self._closed = True
        self.pool.shutdown()
        self.extractor.clear()
        self.similarity.clear()
        log_event(self.logger, "Summarizer closed", level=logging.DEBUG, event="engine_closed")

    def remove_duplicates(self, sentences: Sequence[object]) -> list[str]:
        return self.deduplicator.remove_duplicates(sentences)

    async def extract_phrases(self, text: str) -> list[str]:
        return await self.extractor.extract(text)

    async def detect_themes(self, articles: Sequence[Any]) -> list[str]:
        return await self.theme_detector.detect([to_article(item) for item in articles])

    def metrics_snapshot(self) -> dict[str, float]:
        return self.metrics.snapshot()

    def reset_metrics(self) -> None:
        self.metrics.reset()

    def summarize(self, articles: Any) -> Summary:
        """Summarize ``articles`` from synchronous code.

        Raises:
            SummarizationFailure: If ``articles`` is not a sequence, the engine
                                  is closed, an internal fault occurs, or an
                                  event loop is already running in this thread
        """
        try:
            asyncio.get_running_loop()
        except RuntimeError:
            pass
        else:
            raise SummarizationFailure(
                "summarize() cannot be called from a running event loop; "
                "await summarize_async() instead"
            )
        return asyncio.run(self.summarize_async(articles))

    async def summarize_async(self, articles: Any) -> Summary:
        """Summarize ``articles`` inside a running event loop.

        Args:
            articles: Sequence of Article records or article mappings

        Returns:
            A full Summary, or a fallback Summary when no article is valid or
            confidence is below the configured minimum

        Raises:
            SummarizationFailure: If ``articles`` is not a sequence, the engine
                                  is closed, or an internal fault occurs
        """
        if self._closed:
            raise SummarizationFailure("Summarizer is closed")
        if not _is_article_sequence(articles):
            raise SummarizationFailure("Invalid articles input")

        start = time.perf_counter()
        try:
            return await self._summarize(articles, start)
        except SummarizationFailure:
            raise
        except Exception as exc:  # noqa: BLE001
            log_event(
                self.logger,
                "Summarization failed",
                level=logging.ERROR,
                event="summarization_failed",
                error=str(exc),
            )
            raise SummarizationFailure(f"Summarization failed: {exc}") from exc

    async def _summarize(self, articles: Sequence[Any], start: float) -> Summary:
        valid = self._validate(articles)
        if not valid:
            log_event(
                self.logger,
                "No valid articles to summarize",
                level=logging.WARNING,
                event="no_valid_articles",
                total=len(articles),
            )
            return Summary.fallback(error="No valid articles available")

        themes = await self.theme_detector.detect(valid)
        theme_set = set(themes)

        outcomes = await asyncio.gather(
            *(self._process_article(article, theme_set) for article in valid),
            return_exceptions=True,
        )
        results: list[ArticleProcessingResult] = []
        for article, outcome in zip(valid, outcomes):
            if isinstance(outcome, Exception):
                log_event(
                    self.logger,
                    "Failed to process article",
                    level=logging.WARNING,
                    event="article_failed",
                    title=article.title,
                    error=str(outcome),
                )
                continue
            if isinstance(outcome, BaseException):
                raise outcome
            results.append(outcome)

        confidence = len(results) / len(valid)
        if confidence < self.cfg.engine.min_confidence:
            log_event(
                self.logger,
                "Low confidence summary generated",
                level=logging.WARNING,
                event="low_confidence",
                confidence=confidence,
                processed=len(results),
                total=len(valid),
            )
            return Summary.fallback(
                partial_data=True,
                processed_articles=len(results),
                total_articles=len(valid),
            )

        text = self._compose(themes, results)
        self.metrics.total_processing_time += (time.perf_counter() - start) * 1000.0
        log_event(
            self.logger,
            "Summary complete",
            event="summary_complete",
            processed=len(results),
            total=len(valid),
            themes=len(themes),
        )
        return Summary(
            summary=text,
            themes=tuple(themes),
            confidence=confidence,
            processed_articles=len(results),
            total_articles=len(valid),
            metrics=self.metrics.snapshot(),
        )

    def _validate(self, articles: Sequence[Any]) -> list[Article]:
        valid: list[Article] = []
        for index, item in enumerate(articles):
            article = to_article(item)
            if article.is_valid():
                valid.append(article)
                continue
            error = ValidationError("article is missing title, snippet or source")
            log_event(
                self.logger,
                "Skipping invalid article",
                level=logging.DEBUG,
                event="article_invalid",
                index=index,
                kind=error.kind.value,
                error=error.message,
            )
        return valid

    async def _process_article(
        self, article: Article, themes: set[str]
    ) -> ArticleProcessingResult:
        sentences = self.deduplicator.remove_duplicates(split_sentences(article.snippet))
        phrases = await self.extractor.extract(article.snippet)
        return ArticleProcessingResult(
            source=article.source,
            sentences=sentences,
            key_points=[phrase for phrase in phrases if phrase not in themes],
        )

    def _compose(self, themes: list[str], results: list[ArticleProcessingResult]) -> str:
        lines: list[str] = []
        max_themes = self.cfg.summary.max_themes
        max_sentences = self.cfg.summary.max_sentences

        if themes:
            lines.append(f"Key themes: {', '.join(themes[:max_themes])}.")

        combined = self.deduplicator.remove_duplicates(
            sentence for result in results for sentence in result.sentences
        )
        main_points = ". ".join(combined[:max_sentences])
        if main_points:
            lines.append(main_points + ".")

        sources = list(dict.fromkeys(result.source for result in results))
        lines.append(f"Sources: {', '.join(sources)}")
        return "\n".join(lines)


def _is_article_sequence(value: Any) -> bool:
    if isinstance(value, (str, bytes, bytearray, Mapping)):
        return False
    return isinstance(value, Sequence)
