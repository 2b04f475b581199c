"""Tests for the FIFO-bounded cache."""

import pytest

from news_digest.core.cache import FifoCache


def test_evicts_oldest_inserted_key():
    cache = FifoCache(capacity=1000)
    for i in range(1001):
        cache.put(f"key-{i}", i)

    assert len(cache) == 1000
    assert "key-0" not in cache
    assert cache.get("key-1") == 1
    assert cache.get("key-1000") == 1000


def test_reads_do_not_affect_eviction_order():
    cache = FifoCache(capacity=2)
    cache.put("a", 1)
    cache.put("b", 2)
    assert cache.get("a") == 1
    cache.put("c", 3)

    assert "a" not in cache
    assert cache.keys() == ["b", "c"]


def test_update_keeps_insertion_position():
    cache = FifoCache(capacity=2)
    cache.put("a", 1)
    cache.put("b", 2)
    cache.put("a", 10)
    cache.put("c", 3)

    assert "a" not in cache
    assert cache.get("b") == 2
    assert cache.get("c") == 3


def test_get_default_and_clear():
    cache = FifoCache(capacity=3)
    assert cache.get("missing") is None
    assert cache.get("missing", "fallback") == "fallback"
    cache.put("a", 1)
    cache.clear()
    assert len(cache) == 0


def test_capacity_must_be_positive():
    with pytest.raises(ValueError):
        FifoCache(capacity=0)
