"""Numeric helper functions shared across the application."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal


def round_half_up(value: float, places: int = 2) -> float:
    """Round ``value`` to ``places`` decimals, ties away from zero.

    The exact binary value of the float is used, so ``3.125`` rounds to
    ``3.13`` while ``1.005`` (stored as 1.00499...) rounds to ``1.0``.
    """
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


__all__ = ["round_half_up"]
