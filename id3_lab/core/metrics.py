# id3_lab/core/metrics.py
from __future__ import annotations
import time
from typing import Optional


class MeasuredRun:
    """
    Context manager for wall-clock timing.
    Safe to query .elapsed *inside* the with-block.
    """
    def __init__(self) -> None:
        self.t0: Optional[float] = None
        self.t1: Optional[float] = None

    def __enter__(self) -> "MeasuredRun":
        self.t0 = time.perf_counter()
        self.t1 = None
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.t1 = time.perf_counter()
        return False  # don't suppress exceptions

    @property
    def elapsed(self) -> float:
        """Seconds elapsed. Works before and after __exit__."""
        if self.t0 is None:
            return 0.0
        if self.t1 is None:
            return time.perf_counter() - self.t0
        return self.t1 - self.t0
