"""Aggregated distribution results."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict

import pandas as pd


@dataclass(frozen=True)
class DistributionSummary:
    """Frequency distribution derived from one snapshot of outcomes.

    ``counts`` and ``percentages`` are keyed by sum value in ascending order.
    Percentages are rounded to two decimals and ``expected_value`` is computed
    from those rounded percentages.
    """

    total: int = 0
    counts: Dict[int, int] = field(default_factory=dict)
    percentages: Dict[int, float] = field(default_factory=dict)
    expected_value: float = 0.0

    @property
    def empty(self) -> bool:
        return self.total == 0

    def to_frame(self) -> pd.DataFrame:
        """Return a table with columns ``['sum', 'count', 'percentage']``."""
        if not self.counts:
            return pd.DataFrame(columns=["sum", "count", "percentage"])
        return pd.DataFrame(
            {
                "sum": list(self.counts.keys()),
                "count": list(self.counts.values()),
                "percentage": [self.percentages[value] for value in self.counts],
            }
        )


__all__ = ["DistributionSummary"]
