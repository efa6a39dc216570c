"""Feedback tiers: the five score bands the presentation layer keys on."""

from __future__ import annotations

import enum


class FeedbackTier(enum.IntEnum):
    KEEP_TRYING = 0
    NOT_BAD = 1
    PRETTY_GOOD = 2
    EXCELLENT = 3
    NEARLY_PERFECT = 4


# Lower bound (inclusive) of each tier, highest first
TIER_THRESHOLDS: tuple[tuple[int, FeedbackTier], ...] = (
    (95, FeedbackTier.NEARLY_PERFECT),
    (85, FeedbackTier.EXCELLENT),
    (70, FeedbackTier.PRETTY_GOOD),
    (50, FeedbackTier.NOT_BAD),
)


def tier_for(score: int) -> FeedbackTier:
    for threshold, tier in TIER_THRESHOLDS:
        if score >= threshold:
            return tier
    return FeedbackTier.KEEP_TRYING
