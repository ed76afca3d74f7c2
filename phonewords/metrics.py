from __future__ import annotations

import logging
import time
from contextlib import contextmanager
from typing import Callable, TypeVar

logger = logging.getLogger("phonewords")

T = TypeVar("T")


class StageTimer:
    """Collects per-stage timing for a single decode or comparison."""

    def __init__(self):
        self.timings: dict[str, float] = {}
        self._start = time.perf_counter()

    @contextmanager
    def stage(self, name: str):
        t0 = time.perf_counter()
        yield
        elapsed = time.perf_counter() - t0
        self.timings[name] = round(elapsed * 1000, 1)  # ms
        logger.info("stage=%s elapsed=%.1fms", name, self.timings[name])

    @property
    def total_ms(self) -> float:
        return round((time.perf_counter() - self._start) * 1000, 1)

    def summary(self) -> dict:
        return {**self.timings, "total": self.total_ms}


def time_runs(fn: Callable[[], T], runs: int) -> tuple[T, float]:
    """Call fn `runs` times; return the last result and total elapsed ms."""
    if runs < 1:
        raise ValueError(f"runs must be at least 1, got {runs}")
    result = None
    t0 = time.perf_counter()
    for _ in range(runs):
        result = fn()
    elapsed = round((time.perf_counter() - t0) * 1000, 1)
    return result, elapsed
