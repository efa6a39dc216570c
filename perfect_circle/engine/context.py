"""ScoringContext: the derived geometry every sub-metric reads.

Built once per path; metrics only read from it.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from perfect_circle.models.path import Path
from perfect_circle.utils.geometry import centroid, centroid_distances


@dataclass(frozen=True)
class ScoringContext:
    # Nx2 array of (x, y)
    points: NDArray[np.float64]
    centroid: tuple[float, float]
    # Distance of each point from the centroid
    distances: NDArray[np.float64]
    average_radius: float

    @classmethod
    def from_path(cls, path: Path) -> ScoringContext:
        points = path.as_array()
        center = centroid(points)
        if len(points) == 0:
            distances = np.empty(0)
            avg = 0.0
        else:
            distances = centroid_distances(points, center)
            avg = float(np.mean(distances))
        return cls(points=points, centroid=center, distances=distances, average_radius=avg)

    @property
    def num_points(self) -> int:
        return len(self.points)

    def is_degenerate(self, epsilon: float) -> bool:
        return self.average_radius < epsilon
