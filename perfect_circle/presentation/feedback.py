"""Tier → display text, emoji and sound cue, plus score styling helpers.

Sound cues are note sequences only; synthesis belongs to the UI.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple

from perfect_circle.engine.feedback import FeedbackTier, tier_for


class Note(NamedTuple):
    frequency: float  # Hz
    duration: float  # seconds


@dataclass(frozen=True)
class TierPresentation:
    text: str
    emoji: str
    sound: tuple[Note, ...]


PRESENTATIONS: dict[FeedbackTier, TierPresentation] = {
    FeedbackTier.NEARLY_PERFECT: TierPresentation(
        text="Nearly perfect!",
        emoji="🎯",
        # C E G C'
        sound=(Note(523, 0.2), Note(659, 0.2), Note(784, 0.2), Note(1047, 0.4)),
    ),
    FeedbackTier.EXCELLENT: TierPresentation(
        text="Excellent!",
        emoji="🌟",
        # A C# E
        sound=(Note(440, 0.2), Note(554, 0.2), Note(659, 0.3)),
    ),
    FeedbackTier.PRETTY_GOOD: TierPresentation(
        text="Pretty good!",
        emoji="👍",
        # G C
        sound=(Note(392, 0.2), Note(523, 0.3)),
    ),
    FeedbackTier.NOT_BAD: TierPresentation(
        text="Not bad!",
        emoji="👌",
        sound=(Note(349, 0.3),),
    ),
    FeedbackTier.KEEP_TRYING: TierPresentation(
        text="Keep trying!",
        emoji="🔄",
        sound=(Note(262, 0.4),),
    ),
}

DEFAULT_LABEL = "Perfect Circle Score"
NEW_BEST_LABEL = "New best score"


def present(score: int) -> TierPresentation:
    return PRESENTATIONS[tier_for(score)]


def color_class(score: int) -> str:
    if score >= 85:
        return "excellent"
    if score >= 60:
        return "good"
    return ""


def score_label(score: int, previous_best: int) -> str:
    if previous_best > 0 and score > previous_best:
        return NEW_BEST_LABEL
    return DEFAULT_LABEL


def announcement(score: int) -> str:
    """Screen-reader line for a fresh score."""
    return f"Score: {score}%. {present(score).text}"
