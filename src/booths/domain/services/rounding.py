"""Rounding helpers for quantities and prices."""

from __future__ import annotations

import math

__all__ = ["ceil_to_step", "round_half_up"]


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positives.

    Python's round() uses banker's rounding (round(2.5) == 2); quotes and
    billed quantities always round halves up.
    """
    return int(math.floor(value + 0.5 + 1e-9))


def ceil_to_step(value: float, step: float) -> float:
    """Round up to the next multiple of step (e.g. 0.5 m billing)."""
    return math.ceil(value / step - 1e-9) * step
