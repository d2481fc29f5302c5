"""Dice trial generation."""

from __future__ import annotations

from typing import Optional

import numpy as np

from ..models.outcome import Outcome

DIE_FACES = 6


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """Return a numpy generator, seeded when ``seed`` is provided."""
    return np.random.default_rng(seed)


def generate_outcome(num_dice: int, rng: np.random.Generator) -> Outcome:
    """Roll ``num_dice`` independent dice and record the draws and their sum."""
    if num_dice < 1:
        raise ValueError(f"num_dice must be a positive integer, got {num_dice}")
    draws = rng.integers(1, DIE_FACES + 1, size=int(num_dice))
    values = tuple(int(value) for value in draws)
    return Outcome(sum=sum(values), values=values)


__all__ = ["DIE_FACES", "make_rng", "generate_outcome"]
