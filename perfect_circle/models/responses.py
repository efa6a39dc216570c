"""Report models handed to the presentation layer."""

from __future__ import annotations

from pydantic import BaseModel, Field


class MetricScores(BaseModel):
    circularity: float = 0.0
    completeness: float = 0.0
    smoothness: float = 0.0


class StatsSnapshot(BaseModel):
    best_score: int = 0
    total_attempts: int = 0
    average_score: int = 0


class ScoreReport(BaseModel):
    score: int = Field(..., ge=0, le=100)
    tier: str
    feedback: str
    emoji: str
    color_class: str = ""
    label: str = ""
    announcement: str = ""
    is_new_best: bool = False
    point_count: int = 0
    metrics: MetricScores = Field(default_factory=MetricScores)
    stats: StatsSnapshot = Field(default_factory=StatsSnapshot)
