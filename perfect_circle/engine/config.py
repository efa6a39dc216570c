"""Scoring configuration: the constants of the circle-scoring algorithm."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ScoringConfig:
    """Defaults reproduce the reference game's scoring."""

    # Paths must have strictly more points than this to be scored
    min_points: int = 10
    # Average radius below this is a degenerate (single-spot) path
    radius_epsilon: float = 1e-10

    # Circularity: a 1/3 mean deviation ratio already zeroes the sub-score
    deviation_multiplier: float = 300.0

    # Completeness: a start/end gap equal to the radius zeroes closeness
    closeness_multiplier: float = 100.0
    coverage_points: float = 70.0
    closeness_weight: float = 0.3

    # Final score range
    score_min: int = 0
    score_max: int = 100
