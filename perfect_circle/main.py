"""Command line front end: score recorded gestures and keep stats on disk."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import replace
from pathlib import Path

from dotenv import load_dotenv

from perfect_circle.config import settings
from perfect_circle.engine.config import ScoringConfig
from perfect_circle.engine.scorer import CircleScorer
from perfect_circle.game import CircleGame
from perfect_circle.models.path import Point
from perfect_circle.stats.aggregator import StatsAggregator
from perfect_circle.stats.storage import JsonFileStore

load_dotenv()

logger = logging.getLogger(__name__)

EXIT_BAD_INPUT = 2


def load_points(path: Path) -> list[Point]:
    """Read a JSON list of [x, y] pairs or {"x", "y"} objects."""
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    if isinstance(data, dict):
        data = data.get("points", [])
    if not isinstance(data, list):
        raise ValueError(f"{path}: expected a list of points")
    return [Point.coerce(p) for p in data]


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="perfect-circle",
        description="Score how close a drawn path is to a perfect circle",
    )
    parser.add_argument("--stats", type=Path, help="Stats file (default from settings)")
    parser.add_argument("--log-level", help="Override the configured log level")

    # Same options after the subcommand; SUPPRESS keeps them from
    # overwriting a value given before it
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--stats", type=Path, default=argparse.SUPPRESS)
    common.add_argument("--log-level", default=argparse.SUPPRESS)

    sub = parser.add_subparsers(dest="command", required=True)

    score = sub.add_parser("score", parents=[common], help="Score a JSON file of points")
    score.add_argument("input", type=Path, help="JSON list of [x, y] points")
    score.add_argument("-v", "--verbose", action="store_true", help="Include sub-scores")

    sub.add_parser("stats", parents=[common], help="Print stored stats")
    sub.add_parser("reset-stats", parents=[common], help="Clear stored stats")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    level = (args.log_level or settings.log_level).upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    store = JsonFileStore(args.stats or settings.stats_path)
    aggregator = StatsAggregator(store, key=settings.stats_key)

    if args.command == "stats":
        print(aggregator.stats.model_dump_json(by_alias=True, indent=2))
        return 0

    if args.command == "reset-stats":
        aggregator.reset()
        print("Stats cleared.")
        return 0

    try:
        points = load_points(args.input)
    except (OSError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_BAD_INPUT

    config = replace(ScoringConfig(), min_points=settings.min_points)
    game = CircleGame(scorer=CircleScorer(config=config), aggregator=aggregator)
    game.start()
    report = game.play(points)
    if report is None:
        print(
            f"error: need more than {config.min_points} points, got {len(points)}",
            file=sys.stderr,
        )
        return EXIT_BAD_INPUT

    exclude = None if args.verbose else {"metrics"}
    print(report.model_dump_json(indent=2, exclude=exclude))
    return 0


if __name__ == "__main__":
    sys.exit(main())
