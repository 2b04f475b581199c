"""
Near-duplicate sentence removal using fuzzy similarity.

A single left-to-right pass keeps a sentence unless it is similar to a
sentence that was already kept. Because the similarity score is symmetric,
the output never contains a similar pair and running the pass again on its
own output changes nothing.
"""

from __future__ import annotations

from typing import Iterable

from .metrics import Metrics
from .similarity import SimilarityEngine


class Deduplicator:
    """Greedy, order-preserving near-duplicate filter.

    Attributes:
        engine: Similarity engine used to compare sentences
        batch_size: Number of sentences walked per group
    """

    def __init__(
        self,
        engine: SimilarityEngine,
        batch_size: int = 10,
        metrics: Metrics | None = None,
    ):
        self.engine = engine
        self.batch_size = max(1, batch_size)
        self.metrics = metrics or engine.metrics

    def remove_duplicates(self, sentences: Iterable[object]) -> list[str]:
        """Remove sentences similar to an earlier kept sentence.

        Args:
            sentences: Candidate sentences in their original order. Entries
                       that are not strings or are blank are skipped.

        Returns:
            Kept sentences, preserving original relative order
        """
        with self.metrics.timer("duplicate_removal_time"):
            items = list(sentences)
            kept: list[str] = []
            # The kept list spans batches, so grouping never changes the result.
            for start in range(0, len(items), self.batch_size):
                for sentence in items[start:start + self.batch_size]:
                    if not isinstance(sentence, str) or not sentence.strip():
                        continue
                    if self._is_similar_to_kept(sentence, kept):
                        continue
                    kept.append(sentence)
            return kept

    def _is_similar_to_kept(self, sentence: str, kept: list[str]) -> bool:
        for existing in kept:
            if self.engine.is_similar(sentence, existing):
                return True
        return False
