"""CircleGame: capture → score → stats, one gesture at a time."""

from __future__ import annotations

import logging
from typing import Any

from perfect_circle.capture.session import PathCapture, SessionState
from perfect_circle.engine.feedback import tier_for
from perfect_circle.engine.scorer import CircleScorer, get_scorer
from perfect_circle.models.path import Path
from perfect_circle.models.responses import MetricScores, ScoreReport, StatsSnapshot
from perfect_circle.presentation.feedback import (
    announcement,
    color_class,
    present,
    score_label,
)
from perfect_circle.stats.aggregator import StatsAggregator
from perfect_circle.stats.storage import InMemoryStore

logger = logging.getLogger(__name__)


class CircleGame:
    """Owns the session state and feeds finished gestures to the scorer."""

    def __init__(
        self,
        scorer: CircleScorer | None = None,
        aggregator: StatsAggregator | None = None,
    ) -> None:
        self.scorer = scorer or get_scorer()
        self.aggregator = aggregator or StatsAggregator(InMemoryStore())
        self.session = SessionState()
        self.capture = PathCapture(
            self.session,
            min_points=self.scorer.config.min_points,
            on_complete=self._on_path_complete,
        )
        self.last_report: ScoreReport | None = None

    def start(self) -> None:
        self.session.start_game()

    def reset(self) -> None:
        self.session.reset()
        self.last_report = None

    def begin(self, point: Any) -> bool:
        if self.capture.begin(point):
            self.last_report = None
            return True
        return False

    def append(self, point: Any) -> bool:
        return self.capture.append(point)

    def end(self) -> ScoreReport | None:
        """Finish the gesture; returns its report, or None if it was not scored."""
        if self.capture.end() is None:
            return None
        return self.last_report

    def play(self, points: Any) -> ScoreReport | None:
        """Replay a whole recorded gesture."""
        it = iter(points)
        first = next(it, None)
        if first is None or not self.begin(first):
            return None
        for p in it:
            self.append(p)
        return self.end()

    def _on_path_complete(self, path: Path) -> None:
        breakdown = self.scorer.analyze(path)
        score = breakdown.score
        previous_best = self.aggregator.stats.best_score
        new_best = self.aggregator.is_new_best(score)

        stats = self.aggregator.record(score)
        self.session.current_score = score

        shown = present(score)
        self.last_report = ScoreReport(
            score=score,
            tier=tier_for(score).name,
            feedback=shown.text,
            emoji=shown.emoji,
            color_class=color_class(score),
            label=score_label(score, previous_best),
            announcement=announcement(score),
            is_new_best=new_best,
            point_count=breakdown.point_count,
            metrics=MetricScores(
                circularity=breakdown.circularity,
                completeness=breakdown.completeness,
                smoothness=breakdown.smoothness,
            ),
            stats=StatsSnapshot(
                best_score=stats.best_score,
                total_attempts=stats.total_attempts,
                average_score=stats.average_score,
            ),
        )
        logger.debug("Gesture report: %s", self.last_report.tier)
