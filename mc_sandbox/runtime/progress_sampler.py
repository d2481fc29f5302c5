"""Fixed-cadence progress sampling for a running simulation."""

from __future__ import annotations

import logging
import threading
from typing import Callable, Optional

from ..config import REFRESH_INTERVAL
from ..core.aggregator import aggregate
from ..core.outcome_store import OutcomeStore
from ..models.progress import ProgressSnapshot, RunState

LOGGER = logging.getLogger(__name__)

ProgressListener = Callable[[ProgressSnapshot], None]


class ProgressSampler:
    """Republish store snapshots for one run at a rate independent of the trial rate.

    Consumers recompute and redraw on every published snapshot, so sampling on
    a bounded cadence caps that cost however fast trials are generated.
    """

    def __init__(
        self,
        store: OutcomeStore,
        *,
        run_id: int,
        target: int,
        state_provider: Callable[[], RunState],
        interval: float = REFRESH_INTERVAL,
        publish: Optional[ProgressListener] = None,
    ) -> None:
        if interval <= 0:
            raise ValueError(f"Sampling interval must be positive, got {interval}")
        self._store = store
        self.run_id = run_id
        self.target = target
        self.interval = float(interval)
        self._state_provider = state_provider
        self._publish = publish
        self._latest: Optional[ProgressSnapshot] = None

    @property
    def latest(self) -> Optional[ProgressSnapshot]:
        return self._latest

    def sample(self) -> ProgressSnapshot:
        """Snapshot the store, aggregate it and publish the result."""
        outcomes = self._store.snapshot()
        snapshot = ProgressSnapshot(
            run_id=self.run_id,
            state=self._state_provider(),
            completed=len(outcomes),
            target=self.target,
            outcomes=outcomes,
            summary=aggregate(outcomes),
        )
        self._latest = snapshot
        if self._publish is not None:
            self._publish(snapshot)
        return snapshot

    def run(self, stop_event: threading.Event, lock: threading.RLock) -> int:
        """Sample every ``interval`` seconds until ``stop_event`` is set.

        Each sample is taken under ``lock`` so it never interleaves with a
        trial tick. The final post-stop sample belongs to whoever stops the
        run, not to this loop.
        """
        taken = 0
        while not stop_event.wait(self.interval):
            with lock:
                if stop_event.is_set():
                    break
                self.sample()
            taken += 1
        LOGGER.debug("Progress sampler for run %s exited after %d samples", self.run_id, taken)
        return taken


__all__ = ["ProgressListener", "ProgressSampler"]
