"""Point and Path: the immutable input of the scoring engine."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any, NamedTuple

import numpy as np
from numpy.typing import NDArray


class Point(NamedTuple):
    """A sample in canvas pixel space."""

    x: float
    y: float

    @classmethod
    def coerce(cls, value: Any) -> Point:
        """Accept a Point, an (x, y) pair or an {"x": .., "y": ..} mapping."""
        if isinstance(value, Point):
            return value
        if isinstance(value, Mapping):
            try:
                x, y = float(value["x"]), float(value["y"])
            except KeyError as e:
                raise ValueError(f"Point mapping is missing key {e}") from None
            except (TypeError, ValueError):
                raise ValueError(f"Cannot interpret {value!r} as a point") from None
            return cls._finite(x, y, value)
        try:
            x, y = value
            x, y = float(x), float(y)
        except (TypeError, ValueError):
            raise ValueError(f"Cannot interpret {value!r} as a point") from None
        return cls._finite(x, y, value)

    @classmethod
    def _finite(cls, x: float, y: float, source: Any) -> Point:
        if not (math.isfinite(x) and math.isfinite(y)):
            raise ValueError(f"Point {source!r} has a non-finite coordinate")
        return cls(x, y)


@dataclass(frozen=True)
class Path:
    """Ordered samples of one drawing gesture. Never mutated once built."""

    points: tuple[Point, ...] = ()
    # Cached Nx2 view for the numeric code
    _array: NDArray[np.float64] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        arr = np.array(self.points, dtype=np.float64).reshape(-1, 2)
        if not np.isfinite(arr).all():
            raise ValueError("Path coordinates must be finite")
        arr.setflags(write=False)
        object.__setattr__(self, "_array", arr)

    @classmethod
    def from_points(cls, points: Iterable[Any]) -> Path:
        return cls(tuple(Point.coerce(p) for p in points))

    def as_array(self) -> NDArray[np.float64]:
        return self._array

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)

    @property
    def start(self) -> Point | None:
        return self.points[0] if self.points else None

    @property
    def end(self) -> Point | None:
        return self.points[-1] if self.points else None
