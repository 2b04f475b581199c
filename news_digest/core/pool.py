"""
Fixed-size worker pool for CPU-bound extraction jobs.

The pool owns ``size`` single-threaded executors created up front. Jobs are
routed to a uniformly random executor, and each executor runs one job at a
time to completion. A job that raises only fails its own future.
"""

from __future__ import annotations

from concurrent.futures import Future, ThreadPoolExecutor
import random
from typing import Any, Callable


class WorkerPool:
    """Bounded set of long-lived task executors.

    Attributes:
        size: Number of executors in the pool
    """

    def __init__(self, size: int, rng: random.Random | None = None):
        if size < 1:
            raise ValueError("worker pool size must be at least 1")
        self.size = size
        self._rng = rng or random.Random()
        self._executors = [
            ThreadPoolExecutor(max_workers=1, thread_name_prefix=f"phrase-worker-{index}")
            for index in range(size)
        ]
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def submit(self, fn: Callable[..., Any], *args: Any) -> Future:
        """Hand a job to a randomly chosen executor.

        Raises:
            RuntimeError: If the pool has been shut down
        """
        if self._closed:
            raise RuntimeError("worker pool is shut down")
        executor = self._executors[self._rng.randrange(self.size)]
        return executor.submit(fn, *args)

    def shutdown(self, wait: bool = True) -> None:
        """Terminate every executor. Jobs still queued are cancelled."""
        if self._closed:
            return
        self._closed = True
        for executor in self._executors:
            executor.shutdown(wait=wait, cancel_futures=True)
