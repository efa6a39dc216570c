"""Math helpers: rounding, clamping, deviation. No engine imports."""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import NDArray


def round_half_up(value: float) -> int:
    """Round .5 away from the floor (2.5 → 3, -2.5 → -2), not to even."""
    return int(math.floor(value + 0.5))


def clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))


def mean_absolute_deviation(values: NDArray[np.float64], center: float) -> float:
    """Mean of |v − center|. Used for radius deviation."""
    if len(values) == 0:
        return 0.0
    return float(np.mean(np.abs(values - center)))
