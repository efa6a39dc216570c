"""Metric registry: every sub-metric is a standalone function registered via decorator.

Usage:
    @metric(id="circularity", weight=0.5, order=1)
    def circularity(ctx: ScoringContext, config: ScoringConfig) -> float:
        return 100.0 - ...

Adding a new sub-metric = creating one module in ``engine/metrics`` with the
decorator. The scorer combines every registered metric by its weight.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from perfect_circle.engine.config import ScoringConfig
    from perfect_circle.engine.context import ScoringContext

logger = logging.getLogger(__name__)

MetricFn = Callable[["ScoringContext", "ScoringConfig"], float]


@dataclass
class MetricSpec:
    id: str
    fn: MetricFn
    weight: float
    order: int = 0
    description: str = ""


class MetricRegistry:
    """Registry of all sub-metrics."""

    def __init__(self) -> None:
        self._metrics: dict[str, MetricSpec] = {}

    def register(self, spec: MetricSpec) -> None:
        if spec.id in self._metrics:
            raise ValueError(f"Duplicate metric ID: {spec.id}")
        if spec.weight < 0:
            raise ValueError(f"Metric {spec.id} has negative weight {spec.weight}")
        self._metrics[spec.id] = spec
        logger.debug("Registered metric %s (weight %.2f)", spec.id, spec.weight)

    def get(self, metric_id: str) -> MetricSpec:
        return self._metrics[metric_id]

    def all(self) -> list[MetricSpec]:
        return sorted(self._metrics.values(), key=lambda s: (s.order, s.id))

    @property
    def total_weight(self) -> float:
        return sum(s.weight for s in self._metrics.values())

    @property
    def count(self) -> int:
        return len(self._metrics)


# Module-level singleton
_registry = MetricRegistry()


def get_registry() -> MetricRegistry:
    return _registry


def metric(
    *,
    id: str,
    weight: float,
    order: int = 0,
    description: str = "",
):
    """Decorator to register a sub-metric function."""

    def decorator(fn: MetricFn):
        _registry.register(
            MetricSpec(id=id, fn=fn, weight=weight, order=order, description=description)
        )
        return fn

    return decorator
