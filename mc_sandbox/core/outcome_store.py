"""Append-only outcome accumulator for the active run."""

from __future__ import annotations

import threading
from typing import List, Tuple

from ..models.outcome import Outcome


class OutcomeStore:
    """Thread-safe container for the outcomes of one run.

    Only the simulation driver writes to the store. Readers go through
    ``snapshot()``, which returns an immutable copy.
    """

    def __init__(self) -> None:
        self._outcomes: List[Outcome] = []
        self._lock = threading.Lock()

    def append(self, outcome: Outcome) -> int:
        """Record ``outcome`` and return the new size."""
        with self._lock:
            self._outcomes.append(outcome)
            return len(self._outcomes)

    def reset(self) -> None:
        with self._lock:
            self._outcomes = []

    def snapshot(self) -> Tuple[Outcome, ...]:
        with self._lock:
            return tuple(self._outcomes)

    def size(self) -> int:
        with self._lock:
            return len(self._outcomes)

    def __len__(self) -> int:
        return self.size()


__all__ = ["OutcomeStore"]
