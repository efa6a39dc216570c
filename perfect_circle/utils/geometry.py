"""Leaf-node geometry helpers. No engine imports."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray


def centroid(points: NDArray[np.float64]) -> tuple[float, float]:
    """Compute centroid of a point set."""
    if len(points) == 0:
        return (0.0, 0.0)
    return (float(np.mean(points[:, 0])), float(np.mean(points[:, 1])))


def centroid_distances(
    points: NDArray[np.float64],
    center: tuple[float, float] | None = None,
) -> NDArray[np.float64]:
    """Distance from centroid (or the given center) to each point."""
    cx, cy = center if center is not None else centroid(points)
    return np.sqrt((points[:, 0] - cx) ** 2 + (points[:, 1] - cy) ** 2)


def segment_lengths(points: NDArray[np.float64]) -> NDArray[np.float64]:
    """Length of each consecutive point-to-point segment."""
    diffs = np.diff(points, axis=0)
    return np.sqrt(np.sum(diffs**2, axis=1))


def path_length(points: NDArray[np.float64]) -> float:
    """Total polyline length."""
    if len(points) < 2:
        return 0.0
    return float(np.sum(segment_lengths(points)))


def endpoint_gap(points: NDArray[np.float64]) -> float:
    """Distance between the first and last point."""
    if len(points) < 2:
        return 0.0
    return float(np.hypot(*(points[-1] - points[0])))


def tangent_angles(points: NDArray[np.float64]) -> NDArray[np.float64]:
    """Heading of each segment (atan2 of forward difference)."""
    diffs = np.diff(points, axis=0)
    return np.arctan2(diffs[:, 1], diffs[:, 0])


def turning_angles(points: NDArray[np.float64]) -> NDArray[np.float64]:
    """Unsigned turning angle at every interior point, in [0, π].

    Raw heading differences above π are folded to 2π − diff.
    """
    if len(points) < 3:
        return np.array([])
    diffs = np.abs(np.diff(tangent_angles(points)))
    return np.where(diffs > np.pi, 2 * np.pi - diffs, diffs)
