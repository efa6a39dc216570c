"""Tests for geometry and math helpers."""

import math

import numpy as np
import pytest

from perfect_circle.utils.geometry import (
    centroid,
    centroid_distances,
    endpoint_gap,
    path_length,
    turning_angles,
)
from perfect_circle.utils.math_helpers import clamp, mean_absolute_deviation, round_half_up


def test_centroid_and_distances():
    pts = np.array([[0.0, 0.0], [2.0, 0.0], [2.0, 2.0], [0.0, 2.0]])
    assert centroid(pts) == (1.0, 1.0)
    np.testing.assert_allclose(centroid_distances(pts), [math.sqrt(2)] * 4)
    assert centroid(np.empty((0, 2))) == (0.0, 0.0)


def test_path_length_and_gap():
    pts = np.array([[0.0, 0.0], [3.0, 4.0], [3.0, 0.0]])
    assert path_length(pts) == pytest.approx(9.0)
    assert endpoint_gap(pts) == pytest.approx(3.0)
    assert path_length(pts[:1]) == 0.0


def test_turning_angles_fold_into_zero_pi():
    # Right angle turn, then a turn across the ±π seam
    pts = np.array([[0.0, 0.0], [1.0, 0.0], [1.0, 1.0], [0.0, 1.0], [-1.0, 0.99]])
    angles = turning_angles(pts)
    assert len(angles) == 3
    assert angles[0] == pytest.approx(math.pi / 2)
    assert angles[1] == pytest.approx(math.pi / 2)
    assert 0.0 <= angles[2] < 0.05
    assert np.all((angles >= 0) & (angles <= math.pi))


def test_turning_angles_too_few_points():
    assert len(turning_angles(np.array([[0.0, 0.0], [1.0, 1.0]]))) == 0


@pytest.mark.parametrize(
    "value,expected", [(0.5, 1), (1.5, 2), (2.5, 3), (72.49, 72), (-0.5, 0), (73.333, 73)]
)
def test_round_half_up(value, expected):
    assert round_half_up(value) == expected


def test_clamp_and_mad():
    assert clamp(150, 0, 100) == 100
    assert clamp(-3, 0, 100) == 0
    assert mean_absolute_deviation(np.array([90.0, 110.0]), 100.0) == 10.0
    assert mean_absolute_deviation(np.array([]), 1.0) == 0.0
