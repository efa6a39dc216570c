"""Circle scorer: runs the registered sub-metrics and combines them by weight."""

from __future__ import annotations

import importlib
import logging
import pkgutil
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from perfect_circle.engine.config import ScoringConfig
from perfect_circle.engine.context import ScoringContext
from perfect_circle.engine.registry import MetricRegistry, get_registry
from perfect_circle.models.path import Path
from perfect_circle.utils.math_helpers import clamp, round_half_up

logger = logging.getLogger(__name__)

STATUS_OK = "ok"
STATUS_TOO_SHORT = "too_short"
STATUS_DEGENERATE = "degenerate"


@dataclass(frozen=True)
class ScoreBreakdown:
    """Final score plus the raw sub-scores it was built from."""

    score: int
    # (metric id, sub-score) pairs in registry order; unclamped, may exceed 100
    metrics: tuple[tuple[str, float], ...] = ()
    point_count: int = 0
    centroid: tuple[float, float] = (0.0, 0.0)
    average_radius: float = 0.0
    status: str = STATUS_OK

    @property
    def metric_scores(self) -> dict[str, float]:
        return dict(self.metrics)

    @property
    def circularity(self) -> float:
        return self.metric_scores.get("circularity", 0.0)

    @property
    def completeness(self) -> float:
        return self.metric_scores.get("completeness", 0.0)

    @property
    def smoothness(self) -> float:
        return self.metric_scores.get("smoothness", 0.0)


class CircleScorer:
    """Scores a finished path. Stateless apart from its registry and config."""

    def __init__(
        self,
        registry: MetricRegistry | None = None,
        config: ScoringConfig | None = None,
    ) -> None:
        if registry is None:
            _register_metrics()
            registry = get_registry()
        self.registry = registry
        self.config = config or ScoringConfig()

    def analyze(self, path: Path | Iterable[Any]) -> ScoreBreakdown:
        """Compute every sub-score and the combined, clamped score."""
        if not isinstance(path, Path):
            path = Path.from_points(path)

        cfg = self.config
        if len(path) <= cfg.min_points:
            logger.warning(
                "Refusing to score a path of %d points (need more than %d)",
                len(path),
                cfg.min_points,
            )
            return ScoreBreakdown(
                score=cfg.score_min, point_count=len(path), status=STATUS_TOO_SHORT
            )

        ctx = ScoringContext.from_path(path)
        if ctx.is_degenerate(cfg.radius_epsilon):
            logger.info("Degenerate path: average radius %.3g", ctx.average_radius)
            return ScoreBreakdown(
                score=cfg.score_min,
                metrics=tuple((spec.id, 0.0) for spec in self.registry.all()),
                point_count=ctx.num_points,
                centroid=ctx.centroid,
                average_radius=ctx.average_radius,
                status=STATUS_DEGENERATE,
            )

        metrics: dict[str, float] = {}
        weighted = 0.0
        for spec in self.registry.all():
            value = float(spec.fn(ctx, cfg))
            metrics[spec.id] = value
            weighted += value * spec.weight
            logger.debug("  %s = %.2f (weight %.2f)", spec.id, value, spec.weight)

        final = int(clamp(round_half_up(weighted), cfg.score_min, cfg.score_max))
        logger.info("Scored path of %d points: %d", ctx.num_points, final)
        return ScoreBreakdown(
            score=final,
            metrics=tuple(metrics.items()),
            point_count=ctx.num_points,
            centroid=ctx.centroid,
            average_radius=ctx.average_radius,
        )

    def score(self, path: Path | Iterable[Any]) -> int:
        return self.analyze(path).score


def _register_metrics() -> None:
    """Import all metric modules so @metric decorators fire."""
    package = importlib.import_module("perfect_circle.engine.metrics")
    for _, module_name, _ in pkgutil.iter_modules(package.__path__):
        importlib.import_module(f"perfect_circle.engine.metrics.{module_name}")


_default_scorer: CircleScorer | None = None


def get_scorer() -> CircleScorer:
    global _default_scorer
    if _default_scorer is None:
        _default_scorer = CircleScorer()
    return _default_scorer


def analyze(path: Path | Iterable[Any]) -> ScoreBreakdown:
    return get_scorer().analyze(path)


def score(path: Path | Iterable[Any]) -> int:
    """Score a finished path in [0, 100]. Pure: same path, same score."""
    return get_scorer().score(path)
