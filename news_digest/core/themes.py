"""
Cross-article theme detection.

A theme is a key phrase that shows up in the phrase output of more than
one article. Themes are ranked by how often they occur across all articles.
"""

from __future__ import annotations

import asyncio
from typing import Awaitable, Callable, Sequence

from .metrics import Metrics
from .types import Article

PhraseSource = Callable[[str], Awaitable[list[str]]]


class ThemeDetector:
    """Finds phrases shared between articles.

    Attributes:
        extract: Async callable returning the phrases of a text
        metrics: Metrics receiving the detection time
    """

    def __init__(self, extract: PhraseSource, metrics: Metrics | None = None):
        self.extract = extract
        self.metrics = metrics or Metrics()

    async def detect(self, articles: Sequence[Article]) -> list[str]:
        """Return shared phrases, most frequent first.

        Extraction runs concurrently for every article and all results are
        awaited before counting. Ties keep the order in which phrases first
        appear in the article-ordered phrase stream.
        """
        if not articles:
            return []
        with self.metrics.timer("theme_detection_time"):
            phrase_lists = await asyncio.gather(
                *(self.extract(f"{article.title} {article.snippet}") for article in articles)
            )
            return rank_themes(phrase_lists)


def rank_themes(phrase_lists: Sequence[Sequence[str]]) -> list[str]:
    """Rank phrases that appear in more than one of ``phrase_lists``."""
    counts: dict[str, int] = {}
    article_counts: dict[str, int] = {}
    for phrases in phrase_lists:
        for phrase in phrases:
            counts[phrase] = counts.get(phrase, 0) + 1
        for phrase in set(phrases):
            article_counts[phrase] = article_counts.get(phrase, 0) + 1

    # sorted() is stable and counts is in first-occurrence order.
    ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)
    return [phrase for phrase, _count in ranked if article_counts[phrase] > 1]
