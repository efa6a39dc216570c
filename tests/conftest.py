"""Shared test fixtures and shape generators."""

from __future__ import annotations

import math

import pytest

from perfect_circle.models.path import Path


def circle_points(
    n: int = 100,
    radius: float = 100.0,
    center: tuple[float, float] = (200.0, 200.0),
    sweep: float = 2 * math.pi,
    closed: bool = True,
) -> list[tuple[float, float]]:
    """n samples along an arc. A closed loop spaces them evenly around 2π
    without repeating the start point; an open arc includes both ends."""
    cx, cy = center
    step = sweep / n if closed else sweep / (n - 1)
    return [
        (cx + radius * math.cos(i * step), cy + radius * math.sin(i * step))
        for i in range(n)
    ]


def square_points(
    per_side: int = 25,
    half_side: float = 100.0,
    center: tuple[float, float] = (200.0, 200.0),
) -> list[tuple[float, float]]:
    """Closed square outline, evenly sampled, corners included once."""
    cx, cy = center
    a = half_side
    corners = [(-a, -a), (a, -a), (a, a), (-a, a)]
    pts = []
    for k in range(4):
        x0, y0 = corners[k]
        x1, y1 = corners[(k + 1) % 4]
        for i in range(per_side):
            t = i / per_side
            pts.append((cx + x0 + (x1 - x0) * t, cy + y0 + (y1 - y0) * t))
    return pts


CIRCLE_PATH = Path.from_points(circle_points())
SQUARE_PATH = Path.from_points(square_points())
QUARTER_ARC_PATH = Path.from_points(circle_points(n=100, sweep=math.pi / 2, closed=False))
DOT_PATH = Path.from_points([(50.0, 50.0)] * 20)


@pytest.fixture
def circle_path() -> Path:
    return CIRCLE_PATH


@pytest.fixture
def square_path() -> Path:
    return SQUARE_PATH


@pytest.fixture
def quarter_arc_path() -> Path:
    return QUARTER_ARC_PATH


@pytest.fixture
def dot_path() -> Path:
    return DOT_PATH
