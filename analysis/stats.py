"""Descriptive statistics and rounding shared by the analyzers and scoring."""

import math
from typing import Sequence

import numpy as np


def mean(values: Sequence[float]) -> float:
    """Arithmetic mean, 0.0 for an empty sequence."""
    if len(values) == 0:
        return 0.0
    return float(np.mean(np.asarray(values, dtype=float)))


def std_dev(values: Sequence[float]) -> float:
    """Population standard deviation, 0.0 for an empty sequence."""
    if len(values) == 0:
        return 0.0
    return float(np.std(np.asarray(values, dtype=float)))


def coefficient_of_variation(values: Sequence[float]) -> float:
    """
    Standard deviation over mean, as a percentage.

    Returns 0.0 when the mean is zero so silent or empty inputs never divide
    by zero.
    """
    avg = mean(values)
    if avg == 0:
        return 0.0
    return std_dev(values) / avg * 100.0


def clamp(x: float, lo: float = 0.0, hi: float = 100.0) -> float:
    """Clamp value between lo and hi, mapping NaN/inf to lo."""
    if np.isnan(x) or np.isinf(x):
        return lo
    return max(lo, min(hi, x))


def round_half_up(x: float) -> int:
    """Round to the nearest integer with .5 going up (2.5 -> 3, -2.5 -> -2)."""
    return int(math.floor(x + 0.5))
