"""Completeness: did the stroke go all the way round and come back?

Arc coverage (path length over 2πR, capped at 1) is worth 70 points,
loop closure (start/end gap relative to R) contributes the remaining 30.
"""

from __future__ import annotations

import math

from perfect_circle.engine.config import ScoringConfig
from perfect_circle.engine.context import ScoringContext
from perfect_circle.engine.registry import metric
from perfect_circle.utils.geometry import endpoint_gap, path_length


@metric(
    id="completeness",
    weight=0.3,
    order=2,
    description="Arc-length coverage and loop closure",
)
def completeness(ctx: ScoringContext, config: ScoringConfig) -> float:
    if ctx.num_points < 2 or ctx.is_degenerate(config.radius_epsilon):
        return 0.0

    radius = ctx.average_radius
    gap = endpoint_gap(ctx.points)
    closeness = max(0.0, 100.0 - (gap / radius) * config.closeness_multiplier)

    coverage = path_length(ctx.points) / (2 * math.pi * radius)
    return min(coverage, 1.0) * config.coverage_points + closeness * config.closeness_weight
