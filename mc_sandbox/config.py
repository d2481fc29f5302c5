"""Environment-driven settings for the Monte Carlo sandbox."""

from __future__ import annotations

import os

DEFAULT_NUM_DICE = 2
DEFAULT_NUM_TRIALS = 1000
DEFAULT_TRIAL_RATE = 10.0

# Progress display refresh cadence (seconds), independent of the trial rate.
REFRESH_INTERVAL = float(os.environ.get("MC_SANDBOX_REFRESH_INTERVAL", "0.1"))
LOG_LEVEL = os.environ.get("MC_SANDBOX_LOG_LEVEL", "INFO").upper()

__all__ = [
    "DEFAULT_NUM_DICE",
    "DEFAULT_NUM_TRIALS",
    "DEFAULT_TRIAL_RATE",
    "REFRESH_INTERVAL",
    "LOG_LEVEL",
]
