"""Frequency distribution and expected value of a set of outcomes."""

from __future__ import annotations

from typing import Dict, Iterable, Mapping

import pandas as pd

from ..models.outcome import Outcome
from ..models.results import DistributionSummary
from ..utils.numbers import round_half_up


def expected_value(percentages: Mapping[int, float]) -> float:
    """Percentage-weighted average of the sum values.

    Works from the already rounded percentages, so the result carries their
    rounding error; an empty mapping gives ``0.0``.
    """
    return float(sum(value * percentage / 100.0 for value, percentage in percentages.items()))


def aggregate(outcomes: Iterable[Outcome]) -> DistributionSummary:
    """
    Tally outcome sums into counts, percentages and an expected value.

    Parameters
    ----------
    outcomes:
        Snapshot of recorded outcomes. Order is irrelevant.

    Returns
    -------
    DistributionSummary
        Counts and percentages keyed by sum value in ascending order. An empty
        input yields an empty summary with an expected value of ``0.0``.
    """
    sums = pd.Series([outcome.sum for outcome in outcomes], dtype="int64")
    total = int(sums.size)
    if total == 0:
        return DistributionSummary()

    tally = sums.value_counts().sort_index()
    counts: Dict[int, int] = {int(value): int(count) for value, count in tally.items()}
    percentages: Dict[int, float] = {
        value: round_half_up(count / total * 100.0, 2) for value, count in counts.items()
    }
    return DistributionSummary(
        total=total,
        counts=counts,
        percentages=percentages,
        expected_value=expected_value(percentages),
    )


__all__ = ["aggregate", "expected_value"]
