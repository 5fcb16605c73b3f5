"""Validation result id generation."""

import time
from threading import Lock
from typing import Callable


class ResultIdGenerator:
    """Issues `val-<nanoseconds>` ids that never repeat within a process.

    If the clock has not advanced since the previous id (coarse clocks, or
    calls landing in the same tick), the last value is bumped by one.
    """

    def __init__(self, clock: Callable[[], int] = time.time_ns) -> None:
        self._clock = clock
        self._lock = Lock()
        self._last = 0

    def __call__(self) -> str:
        with self._lock:
            stamp = max(self._clock(), self._last + 1)
            self._last = stamp
        return f"val-{stamp}"
