"""Tests for the feedback tier boundaries."""

import pytest

from perfect_circle.engine.feedback import FeedbackTier, tier_for


@pytest.mark.parametrize(
    "score,tier",
    [
        (100, FeedbackTier.NEARLY_PERFECT),
        (95, FeedbackTier.NEARLY_PERFECT),
        (94, FeedbackTier.EXCELLENT),
        (85, FeedbackTier.EXCELLENT),
        (84, FeedbackTier.PRETTY_GOOD),
        (70, FeedbackTier.PRETTY_GOOD),
        (69, FeedbackTier.NOT_BAD),
        (50, FeedbackTier.NOT_BAD),
        (49, FeedbackTier.KEEP_TRYING),
        (0, FeedbackTier.KEEP_TRYING),
    ],
)
def test_tier_boundaries(score, tier):
    assert tier_for(score) is tier


def test_five_ordered_tiers():
    assert len(FeedbackTier) == 5
    assert FeedbackTier.NEARLY_PERFECT > FeedbackTier.EXCELLENT > FeedbackTier.KEEP_TRYING
