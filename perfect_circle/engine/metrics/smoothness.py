"""Smoothness: average turning angle against a regular polygon.

A regular N-gon turns 2π/N at every vertex. Paths that turn more per
sample on average are jagged; the ratio expected/actual is capped at 1.
Expected turning depends on the sample count, so denser strokes expect
smaller steps.
"""

from __future__ import annotations

import math

import numpy as np

from perfect_circle.engine.config import ScoringConfig
from perfect_circle.engine.context import ScoringContext
from perfect_circle.engine.registry import metric
from perfect_circle.utils.geometry import turning_angles


@metric(
    id="smoothness",
    weight=0.2,
    order=3,
    description="Mean turning angle relative to a regular polygon",
)
def smoothness(ctx: ScoringContext, config: ScoringConfig) -> float:
    if ctx.num_points < 3:
        return 100.0

    angles = turning_angles(ctx.points)
    avg_change = float(np.mean(angles))
    # A straight stroke never turns; the capped ratio tends to 1
    if avg_change <= 0.0:
        return 100.0

    expected = (2 * math.pi) / ctx.num_points
    return min(expected / avg_change, 1.0) * 100.0
