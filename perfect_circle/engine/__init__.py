"""Perfect Circle scoring engine."""

from perfect_circle.engine.config import ScoringConfig
from perfect_circle.engine.context import ScoringContext
from perfect_circle.engine.feedback import FeedbackTier, tier_for
from perfect_circle.engine.registry import get_registry, metric
from perfect_circle.engine.scorer import CircleScorer, ScoreBreakdown, analyze, score

__all__ = [
    "metric",
    "get_registry",
    "ScoringConfig",
    "ScoringContext",
    "CircleScorer",
    "ScoreBreakdown",
    "FeedbackTier",
    "tier_for",
    "analyze",
    "score",
]
