"""Simulation configuration model."""

from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..config import DEFAULT_NUM_DICE, DEFAULT_NUM_TRIALS, DEFAULT_TRIAL_RATE


class SimulationConfig(BaseModel):
    """Immutable parameters for one simulation run."""

    model_config = ConfigDict(frozen=True)

    num_dice: int = Field(
        DEFAULT_NUM_DICE, ge=1, description="Number of dice rolled per trial."
    )
    num_trials: int = Field(
        DEFAULT_NUM_TRIALS, ge=1, description="Target number of trials for the run."
    )
    trial_rate: float = Field(
        DEFAULT_TRIAL_RATE,
        gt=0.0,
        allow_inf_nan=False,
        description="Trials attempted per second.",
    )
    random_seed: Optional[int] = Field(
        default=None,
        ge=0,
        description="Seed for reproducible runs; None draws fresh entropy.",
    )

    @property
    def trial_delay(self) -> float:
        """Seconds between consecutive trial ticks."""
        return 1.0 / self.trial_rate

    def to_metadata(self) -> Dict[str, Any]:
        """Serialise into a plain dictionary."""
        return {
            "num_dice": int(self.num_dice),
            "num_trials": int(self.num_trials),
            "trial_rate": float(self.trial_rate),
            "random_seed": self.random_seed,
        }

    @classmethod
    def from_metadata(cls, metadata: Dict[str, Any]) -> "SimulationConfig":
        """Rehydrate a configuration, falling back to form defaults."""
        return cls(
            num_dice=metadata.get("num_dice", DEFAULT_NUM_DICE),
            num_trials=metadata.get("num_trials", DEFAULT_NUM_TRIALS),
            trial_rate=metadata.get("trial_rate", DEFAULT_TRIAL_RATE),
            random_seed=metadata.get("random_seed"),
        )


__all__ = ["SimulationConfig"]
