"""Perfect Circle: score how close a freehand stroke is to a circle."""

from perfect_circle.engine import FeedbackTier, ScoreBreakdown, analyze, score, tier_for
from perfect_circle.models.path import Path, Point

__version__ = "0.1.0"

__all__ = [
    "Point",
    "Path",
    "ScoreBreakdown",
    "FeedbackTier",
    "analyze",
    "score",
    "tier_for",
]
