"""Data models for streaming simulation progress to consumers."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Tuple

from .outcome import Outcome
from .results import DistributionSummary


class RunState(str, Enum):
    """Lifecycle of a run under one configuration."""

    NOT_STARTED = "not_started"
    RUNNING = "running"
    COMPLETED = "completed"
    STOPPED = "stopped"

    @property
    def terminal(self) -> bool:
        return self in (RunState.COMPLETED, RunState.STOPPED)


@dataclass(frozen=True)
class ProgressSnapshot:
    """
    Read-only view published by the progress sampler.

    Holds an immutable copy of the outcomes recorded so far together with the
    statistics derived from that copy, so consumers never see the live store.
    """

    run_id: int
    state: RunState
    completed: int
    target: int
    outcomes: Tuple[Outcome, ...] = ()
    summary: DistributionSummary = field(default_factory=DistributionSummary)
    timestamp: float = field(default_factory=time.time)

    @property
    def running(self) -> bool:
        return self.state is RunState.RUNNING

    @property
    def progress_fraction(self) -> float:
        if self.target <= 0:
            return 0.0
        return min(self.completed / self.target, 1.0)

    @property
    def distribution(self) -> Dict[int, float]:
        return self.summary.percentages

    @property
    def expected_value(self) -> float:
        return self.summary.expected_value


__all__ = ["RunState", "ProgressSnapshot"]
