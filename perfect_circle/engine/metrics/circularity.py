"""Circularity: how constant the distance from the centroid stays.

ratio = mean|d − R| / R, score = 100 − 300·ratio (floored at 0).
A perfect circle has ratio 0; a square sits near 0.095.
"""

from __future__ import annotations

from perfect_circle.engine.config import ScoringConfig
from perfect_circle.engine.context import ScoringContext
from perfect_circle.engine.registry import metric
from perfect_circle.utils.math_helpers import mean_absolute_deviation


@metric(
    id="circularity",
    weight=0.5,
    order=1,
    description="Radius deviation from the average radius",
)
def circularity(ctx: ScoringContext, config: ScoringConfig) -> float:
    if ctx.num_points == 0 or ctx.is_degenerate(config.radius_epsilon):
        return 0.0
    deviation = mean_absolute_deviation(ctx.distances, ctx.average_radius)
    ratio = deviation / ctx.average_radius
    return max(0.0, 100.0 - ratio * config.deviation_multiplier)
