"""Tests for the metric registry."""

import pytest

from perfect_circle.engine.context import ScoringContext
from perfect_circle.engine.registry import MetricRegistry, MetricSpec, get_registry
from perfect_circle.engine.scorer import get_scorer


def _zero(ctx: ScoringContext, config) -> float:
    return 0.0


def test_register_and_get():
    reg = MetricRegistry()
    spec = MetricSpec(id="m1", fn=_zero, weight=0.5)
    reg.register(spec)
    assert reg.get("m1") is spec
    assert reg.count == 1


def test_duplicate_id_rejected():
    reg = MetricRegistry()
    reg.register(MetricSpec(id="m1", fn=_zero, weight=0.5))
    with pytest.raises(ValueError, match="Duplicate"):
        reg.register(MetricSpec(id="m1", fn=_zero, weight=0.1))


def test_negative_weight_rejected():
    reg = MetricRegistry()
    with pytest.raises(ValueError):
        reg.register(MetricSpec(id="m1", fn=_zero, weight=-0.1))


def test_all_sorted_by_order_then_id():
    reg = MetricRegistry()
    reg.register(MetricSpec(id="b", fn=_zero, weight=0.1, order=2))
    reg.register(MetricSpec(id="z", fn=_zero, weight=0.1, order=1))
    reg.register(MetricSpec(id="a", fn=_zero, weight=0.1, order=2))
    assert [s.id for s in reg.all()] == ["z", "a", "b"]


def test_default_registry_has_three_weighted_metrics():
    get_scorer()
    reg = get_registry()
    assert [s.id for s in reg.all()] == ["circularity", "completeness", "smoothness"]
    assert [s.weight for s in reg.all()] == [0.5, 0.3, 0.2]
    assert reg.total_weight == pytest.approx(1.0)
