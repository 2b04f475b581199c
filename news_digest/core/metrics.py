"""
Process-wide counters and timers for the digest engine.

Metrics are advisory. Concurrent summarize calls on the same engine update
them without synchronization and may under-count; nothing in a Summary's
content depends on them.
"""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
import time
from typing import Iterator


@dataclass
class Metrics:
    """Timing (milliseconds) and cache statistics accumulated by an engine.

    Attributes:
        total_processing_time: Time spent in successful summarize calls
        phrase_extraction_time: Time between dispatching an extraction job and its result
        theme_detection_time: Time spent detecting themes
        duplicate_removal_time: Time spent removing near-duplicate sentences
        cache_hits: Phrase and similarity cache hits
        cache_misses: Phrase and similarity cache misses
    """
    total_processing_time: float = 0.0
    phrase_extraction_time: float = 0.0
    theme_detection_time: float = 0.0
    duplicate_removal_time: float = 0.0
    cache_hits: int = 0
    cache_misses: int = 0

    def record_hit(self) -> None:
        self.cache_hits += 1

    def record_miss(self) -> None:
        self.cache_misses += 1

    @contextmanager
    def timer(self, name: str) -> Iterator[None]:
        """Add the elapsed milliseconds of the block to the ``name`` field."""
        start = time.perf_counter()
        try:
            yield
        finally:
            elapsed = (time.perf_counter() - start) * 1000.0
            setattr(self, name, getattr(self, name) + elapsed)

    def snapshot(self) -> dict[str, float]:
        return {
            "totalProcessingTime": self.total_processing_time,
            "phraseExtractionTime": self.phrase_extraction_time,
            "themeDetectionTime": self.theme_detection_time,
            "duplicateRemovalTime": self.duplicate_removal_time,
            "cacheHits": self.cache_hits,
            "cacheMisses": self.cache_misses,
        }

    def reset(self) -> None:
        self.total_processing_time = 0.0
        self.phrase_extraction_time = 0.0
        self.theme_detection_time = 0.0
        self.duplicate_removal_time = 0.0
        self.cache_hits = 0
        self.cache_misses = 0
