"""
Bounded in-memory memoization with FIFO eviction.

Both the phrase cache and the similarity cache are FifoCache instances.
Eviction removes the oldest *inserted* key, regardless of how recently it
was read.
"""

from __future__ import annotations

from typing import Generic, Hashable, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

_MISSING = object()


class FifoCache(Generic[K, V]):
    """Mapping capped at ``capacity`` entries, evicting in insertion order.

    Relies on dict insertion ordering: the first key in iteration order is
    always the oldest insertion. Updating an existing key keeps its
    position, so re-putting never postpones eviction.

    Attributes:
        capacity: Maximum number of entries kept
    """

    def __init__(self, capacity: int = 1000):
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._data: dict[K, V] = {}

    def get(self, key: K, default: V | None = None) -> V | None:
        value = self._data.get(key, _MISSING)
        if value is _MISSING:
            return default
        return value  # type: ignore[return-value]

    def put(self, key: K, value: V) -> None:
        self._data[key] = value
        while len(self._data) > self.capacity:
            oldest = next(iter(self._data))
            del self._data[oldest]

    def clear(self) -> None:
        self._data.clear()

    def keys(self) -> list[K]:
        return list(self._data)

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __len__(self) -> int:
        return len(self._data)
