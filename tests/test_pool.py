"""Tests for the fixed-size worker pool."""

import random
import threading

import pytest

from news_digest.core.pool import WorkerPool


def _boom():
    raise RuntimeError("job failed")


def test_submit_returns_result():
    pool = WorkerPool(2)
    try:
        assert pool.submit(sum, [1, 2, 3]).result(timeout=5) == 6
    finally:
        pool.shutdown()


def test_failing_job_only_fails_its_own_future():
    pool = WorkerPool(1)
    try:
        bad = pool.submit(_boom)
        good = pool.submit(len, "abc")
        with pytest.raises(RuntimeError, match="job failed"):
            bad.result(timeout=5)
        assert good.result(timeout=5) == 3
        assert pool.submit(len, "ab").result(timeout=5) == 2
    finally:
        pool.shutdown()


def test_jobs_run_on_pool_threads():
    pool = WorkerPool(3, rng=random.Random(7))
    try:
        names = {
            pool.submit(lambda: threading.current_thread().name).result(timeout=5)
            for _ in range(20)
        }
        assert names
        assert all(name.startswith("phrase-worker-") for name in names)
    finally:
        pool.shutdown()


def test_submit_after_shutdown_raises():
    pool = WorkerPool(1)
    pool.shutdown()
    assert pool.closed
    with pytest.raises(RuntimeError):
        pool.submit(len, "abc")
    pool.shutdown()


def test_size_must_be_positive():
    with pytest.raises(ValueError):
        WorkerPool(0)
