"""Stats aggregator: best / attempts / average across every scored gesture."""

from __future__ import annotations

import logging

from pydantic import ValidationError

from perfect_circle.models.stats import Stats
from perfect_circle.stats.storage import KeyValueStore
from perfect_circle.utils.math_helpers import round_half_up

logger = logging.getLogger(__name__)

STATS_KEY = "perfectCircleStats"


class StatsAggregator:
    """Loads once, then updates and re-saves after every recorded score."""

    def __init__(self, store: KeyValueStore, key: str = STATS_KEY) -> None:
        self.store = store
        self.key = key
        self._stats = self._load()

    def _load(self) -> Stats:
        raw = self.store.get(self.key)
        if raw is None:
            return Stats()
        try:
            return Stats.from_json(raw)
        except ValidationError as e:
            logger.warning("Discarding unreadable stats record %r: %s", self.key, e)
            return Stats()

    def _save(self) -> None:
        self.store.set(self.key, self._stats.to_json())

    @property
    def stats(self) -> Stats:
        return self._stats.model_copy()

    def is_new_best(self, score: int) -> bool:
        """True when ``score`` beats an existing positive best."""
        return self._stats.best_score > 0 and score > self._stats.best_score

    def record(self, score: int) -> Stats:
        if not 0 <= score <= 100:
            raise ValueError(f"Score must be within [0, 100], got {score}")

        s = self._stats
        attempts = s.total_attempts + 1
        total = s.total_score + score
        self._stats = Stats(
            best_score=max(s.best_score, score),
            total_attempts=attempts,
            total_score=total,
            average_score=round_half_up(total / attempts),
        )
        self._save()
        logger.info(
            "Recorded score %d (best %d, attempts %d, average %d)",
            score,
            self._stats.best_score,
            attempts,
            self._stats.average_score,
        )
        return self.stats

    def reset(self) -> None:
        self.store.delete(self.key)
        self._stats = Stats()
