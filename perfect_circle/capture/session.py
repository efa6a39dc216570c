"""Path capture: collects one press-move-release gesture into a Path.

SessionState is the explicit game state the capture component mutates;
scoring only ever sees the frozen Path handed to ``on_complete``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from perfect_circle.models.path import Path, Point

logger = logging.getLogger(__name__)

DEFAULT_MIN_POINTS = 10


@dataclass
class SessionState:
    """Mutable per-session game state."""

    game_started: bool = False
    is_drawing: bool = False
    # Samples of the in-progress gesture
    points: list[Point] = field(default_factory=list)
    current_score: int = 0

    def start_game(self) -> None:
        self.game_started = True

    def reset(self) -> None:
        """Back to the start screen: clear the path, score and started flag."""
        self.game_started = False
        self.is_drawing = False
        self.points = []
        self.current_score = 0


class PathCapture:
    """begin / append / end over a SessionState."""

    def __init__(
        self,
        session: SessionState,
        min_points: int = DEFAULT_MIN_POINTS,
        on_complete: Callable[[Path], Any] | None = None,
    ) -> None:
        self.session = session
        self.min_points = min_points
        self.on_complete = on_complete

    def begin(self, point: Any) -> bool:
        """Start a gesture, discarding any previous path. False if no game is running."""
        if not self.session.game_started:
            logger.debug("Ignoring gesture start: game not started")
            return False
        self.session.is_drawing = True
        self.session.points = [Point.coerce(point)]
        return True

    def append(self, point: Any) -> bool:
        if not (self.session.is_drawing and self.session.game_started):
            return False
        self.session.points.append(Point.coerce(point))
        return True

    def end(self) -> Path | None:
        """Finish the gesture. Hands the path on only if it is long enough."""
        if not (self.session.is_drawing and self.session.game_started):
            return None
        self.session.is_drawing = False
        path = Path(tuple(self.session.points))

        if len(path) > self.min_points:
            if self.on_complete is not None:
                self.on_complete(path)
        else:
            logger.debug(
                "Gesture too short to score: %d points (need more than %d)",
                len(path),
                self.min_points,
            )
        return path
