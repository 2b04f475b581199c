"""
Fuzzy sentence similarity with a bounded result cache.

Scores use rapidfuzz's normalized Indel ratio on case-folded text with
punctuation and whitespace removed, so "Hamilton wins!" and "hamilton wins"
compare as identical and strings with no letters in common score zero.
"""

from __future__ import annotations

import logging

from rapidfuzz import fuzz
from rapidfuzz.utils import default_process

from ..logging_utils import get_logger, log_event
from .cache import FifoCache
from .errors import SimilarityError
from .metrics import Metrics


class SimilarityEngine:
    """Scores sentence pairs in [0, 1] and memoizes the results.

    The cache key is the ordered pair ``(a, b)``, so ``(a, b)`` and
    ``(b, a)`` are cached as separate entries even though the score is
    symmetric.

    Attributes:
        threshold: Scores strictly above this mark a pair as similar
        cache: FIFO cache of computed scores
    """

    def __init__(
        self,
        threshold: float = 0.6,
        capacity: int = 1000,
        metrics: Metrics | None = None,
        logger: logging.Logger | None = None,
    ):
        self.threshold = threshold
        self.cache: FifoCache[tuple[str, str], float] = FifoCache(capacity)
        self.metrics = metrics or Metrics()
        self.logger = logger or get_logger()

    def similarity(self, a: str, b: str) -> float:
        key = (a, b)
        cached = self.cache.get(key)
        if cached is not None:
            self.metrics.record_hit()
            return cached

        self.metrics.record_miss()
        try:
            score = compare(a, b)
        except SimilarityError as exc:
            # Unscorable pairs count as not similar; nothing is cached.
            log_event(
                self.logger,
                "String similarity comparison failed",
                level=logging.WARNING,
                event="similarity_failed",
                error=exc.message,
            )
            return 0.0
        self.cache.put(key, score)
        return score

    def is_similar(self, a: str, b: str) -> bool:
        return self.similarity(a, b) > self.threshold

    def clear(self) -> None:
        self.cache.clear()


def compare(a: str, b: str) -> float:
    """Uncached similarity score in [0, 1].

    Raises:
        SimilarityError: If either argument is not a string or scoring fails
    """
    if not isinstance(a, str) or not isinstance(b, str):
        raise SimilarityError(
            f"cannot compare {type(a).__name__} with {type(b).__name__}"
        )
    if a == b:
        return 1.0
    # Compare letters and digits only.
    left = "".join(default_process(a).split())
    right = "".join(default_process(b).split())
    if not left or not right:
        return 0.0
    try:
        return fuzz.ratio(left, right) / 100.0
    except (TypeError, ValueError) as exc:
        raise SimilarityError(str(exc)) from exc
