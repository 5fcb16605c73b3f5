"""In-memory storage for validation results.

Results are kept in insertion order in a dict keyed by validation id, so a
lookup by id is O(1). Once `max_results` is reached the oldest results are
evicted. All data lives in memory and is lost on restart.
"""

from collections import OrderedDict
from threading import Lock
from typing import Optional

from app.models import ValidationResult


class ResultStore:
    """Thread-safe, bounded in-memory store of validation results."""

    def __init__(self, max_results: int = 10_000) -> None:
        if max_results < 1:
            raise ValueError("max_results must be at least 1")
        self.max_results = max_results
        self._lock = Lock()
        self._results: "OrderedDict[str, ValidationResult]" = OrderedDict()

    def save(self, result: ValidationResult) -> None:
        """Store a copy of `result`, evicting the oldest entries if full."""
        with self._lock:
            self._results[result.id] = result.model_copy(deep=True)
            self._results.move_to_end(result.id)
            while len(self._results) > self.max_results:
                self._results.popitem(last=False)

    def get(self, validation_id: str) -> Optional[ValidationResult]:
        """Return a copy of the stored result, or None if unknown."""
        with self._lock:
            result = self._results.get(validation_id)
            return result.model_copy(deep=True) if result is not None else None

    def __len__(self) -> int:
        with self._lock:
            return len(self._results)
