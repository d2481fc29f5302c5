"""Background execution of dice simulations with decoupled progress sampling."""

from __future__ import annotations

import logging
import threading
import time
from concurrent.futures import Future, ThreadPoolExecutor, wait as wait_futures
from dataclasses import dataclass, field
from typing import Any, Callable, List, Mapping, Optional, Set, Tuple, Union

import numpy as np

from ..config import REFRESH_INTERVAL
from ..core.outcome_store import OutcomeStore
from ..core.trial_generator import generate_outcome, make_rng
from ..core.validator import validate_config
from ..models.outcome import Outcome
from ..models.progress import ProgressSnapshot, RunState
from ..models.simulation import SimulationConfig
from .progress_sampler import ProgressListener, ProgressSampler

LOGGER = logging.getLogger(__name__)

TrialObserver = Callable[[Outcome, int], None]


@dataclass
class _Run:
    """Bookkeeping for one adopted configuration."""

    run_id: int
    config: SimulationConfig
    rng: np.random.Generator
    sampler: Optional[ProgressSampler] = None
    state: RunState = RunState.RUNNING
    stop_event: threading.Event = field(default_factory=threading.Event)
    done_event: threading.Event = field(default_factory=threading.Event)
    futures: List[Future] = field(default_factory=list)
    threads: Set[threading.Thread] = field(default_factory=set)


class SimulationDriver:
    """Run dice trials at a configured rate and publish progress at a fixed cadence.

    The trial ticker and the progress ticker run as two tasks on a private
    executor. Every store mutation and every sample happens under one
    re-entrant lock, and both tickers share a single stop event per run, so
    stopping, reconfiguring or shutting down cancels them together.
    """

    def __init__(self, *, refresh_interval: float = REFRESH_INTERVAL, max_burst: int = 1000) -> None:
        if refresh_interval <= 0:
            raise ValueError(f"refresh_interval must be positive, got {refresh_interval}")
        self.refresh_interval = float(refresh_interval)
        self.max_burst = max(1, int(max_burst))
        self._executor = ThreadPoolExecutor(max_workers=2, thread_name_prefix="mc-sandbox")
        self._lock = threading.RLock()
        self._store = OutcomeStore()
        self._run: Optional[_Run] = None
        self._run_counter = 0
        self._listeners: List[ProgressListener] = []
        self._latest: Optional[ProgressSnapshot] = None
        self._closed = False
        self.trial_observer: Optional[TrialObserver] = None

    # ------------------------------------------------------------------ status
    @property
    def state(self) -> RunState:
        with self._lock:
            return self._run.state if self._run is not None else RunState.NOT_STARTED

    @property
    def running(self) -> bool:
        return self.state is RunState.RUNNING

    @property
    def config(self) -> Optional[SimulationConfig]:
        with self._lock:
            return self._run.config if self._run is not None else None

    @property
    def run_id(self) -> int:
        with self._lock:
            return self._run.run_id if self._run is not None else 0

    @property
    def completed(self) -> int:
        return self._store.size()

    def snapshot(self) -> Tuple[Outcome, ...]:
        """Immutable copy of the outcomes recorded so far in the current run."""
        return self._store.snapshot()

    def latest_progress(self) -> ProgressSnapshot:
        """Most recently published progress, or an empty idle snapshot."""
        with self._lock:
            if self._latest is not None:
                return self._latest
            return ProgressSnapshot(run_id=0, state=RunState.NOT_STARTED, completed=0, target=0)

    # ------------------------------------------------------------------ listeners
    def subscribe(self, listener: ProgressListener) -> None:
        with self._lock:
            self._listeners.append(listener)

    def unsubscribe(self, listener: ProgressListener) -> None:
        with self._lock:
            if listener in self._listeners:
                self._listeners.remove(listener)

    def _publish(self, snapshot: ProgressSnapshot) -> None:
        self._latest = snapshot
        for listener in list(self._listeners):
            try:
                listener(snapshot)
            except Exception:
                LOGGER.exception("Progress listener %r failed", listener)

    # ------------------------------------------------------------------ control
    def configure(self, config: Union[SimulationConfig, Mapping[str, Any]]) -> int:
        """Adopt ``config``: cancel the previous run, reset the store, start a new run.

        Raises ``ConfigurationError`` before touching any state when the
        configuration is invalid. Returns the id of the new run.
        """
        validated = validate_config(config)
        rng = make_rng(validated.random_seed)
        with self._lock:
            if self._closed:
                raise RuntimeError("SimulationDriver has been shut down.")
            previous = self._run
            if previous is not None:
                self._finish(previous, RunState.STOPPED)

            self._store.reset()
            self._run_counter += 1
            run = _Run(
                run_id=self._run_counter,
                config=validated,
                rng=rng,
            )
            sampler = ProgressSampler(
                self._store,
                run_id=run.run_id,
                target=validated.num_trials,
                state_provider=lambda: run.state,
                interval=self.refresh_interval,
                publish=self._publish,
            )
            run.sampler = sampler
            self._run = run
            sampler.sample()
            run.futures = [
                self._executor.submit(self._trial_loop, run),
                self._executor.submit(self._sampler_loop, run, sampler),
            ]
            LOGGER.info(
                "Started run %d: %d dice, %d trials at %.3g trials/s",
                run.run_id,
                validated.num_dice,
                validated.num_trials,
                validated.trial_rate,
            )
        if previous is not None:
            self._join(previous)
        return run.run_id

    def stop(self) -> bool:
        """Stop the current run. Returns False when nothing was running."""
        with self._lock:
            run = self._run
            if run is None or not self._finish(run, RunState.STOPPED):
                LOGGER.debug("Stop requested but no run is active.")
                return False
        self._join(run)
        return True

    def wait(self, timeout: Optional[float] = None) -> bool:
        """Block until the current run reaches a terminal state."""
        with self._lock:
            run = self._run
        if run is None:
            return True
        return run.done_event.wait(timeout)

    # ------------------------------------------------------------------ cleanup
    def shutdown(self, wait: bool = True) -> None:
        self.stop()
        with self._lock:
            self._closed = True
        self._executor.shutdown(wait=wait)

    def __enter__(self) -> "SimulationDriver":
        return self

    def __exit__(self, *_exc: Any) -> None:
        self.shutdown()

    # ------------------------------------------------------------------ internals
    def _finish(self, run: _Run, state: RunState) -> bool:
        """Cancel both tickers of ``run`` and publish its final snapshot. Caller holds the lock."""
        if run.stop_event.is_set():
            return False
        run.stop_event.set()
        run.state = state
        if run.sampler is not None:
            run.sampler.sample()
        run.done_event.set()
        LOGGER.info(
            "Run %d %s after %d/%d trials",
            run.run_id,
            state.value,
            self._store.size(),
            run.config.num_trials,
        )
        return True

    def _join(self, run: _Run) -> None:
        # A ticker may stop its own run (e.g. from a trial observer); never wait on ourselves.
        if threading.current_thread() in run.threads:
            return
        wait_futures(run.futures)

    def _tick(self, run: _Run) -> None:
        """One trial: generate, append, then check the target. Caller holds the lock."""
        outcome = generate_outcome(run.config.num_dice, run.rng)
        size = self._store.append(outcome)
        LOGGER.debug("Run %d trial %d: %s", run.run_id, size, outcome.values)
        if size >= run.config.num_trials:
            self._finish(run, RunState.COMPLETED)
        if self.trial_observer is not None:
            self.trial_observer(outcome, size)

    @staticmethod
    def _next_wait(started: float, ticks: int, period: float) -> float:
        # Event.wait overflows past TIMEOUT_MAX; very slow rates wake early and wait again.
        remaining = started + (ticks + 1) * period - time.monotonic()
        return min(threading.TIMEOUT_MAX, max(0.0, remaining))

    def _trial_loop(self, run: _Run) -> int:
        run.threads.add(threading.current_thread())
        period = run.config.trial_delay
        started = time.monotonic()
        ticks = 0
        try:
            while not run.stop_event.wait(self._next_wait(started, ticks, period)):
                due = int((time.monotonic() - started) / period) - ticks
                if due <= 0:
                    continue
                for _ in range(min(due, self.max_burst)):
                    with self._lock:
                        if run.stop_event.is_set():
                            return ticks
                        self._tick(run)
                    ticks += 1
        except Exception:
            LOGGER.exception("Trial loop for run %d failed", run.run_id)
            with self._lock:
                self._finish(run, RunState.STOPPED)
            raise
        return ticks

    def _sampler_loop(self, run: _Run, sampler: ProgressSampler) -> int:
        run.threads.add(threading.current_thread())
        return sampler.run(run.stop_event, self._lock)


__all__ = ["SimulationDriver", "TrialObserver"]
