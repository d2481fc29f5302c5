"""Outcome of a single trial."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Outcome:
    """Recorded result of one trial: the individual draws and their sum."""

    sum: int
    values: Tuple[int, ...]

    @property
    def num_dice(self) -> int:
        return len(self.values)


__all__ = ["Outcome"]
