"""Popularity scoring for resources.

The confidence score is the lower bound of the Wilson score interval for
the proportion of upvotes. A resource with 70 of 100 upvotes outranks one
with 7 of 10, because the larger sample leaves less room for doubt.

The hot score weighs net votes against creation time so that newer
resources float above older ones with similar support.
"""

import math
from datetime import datetime, timezone

from topfive.config import RankingSettings

from .base import Service

# 2005-12-08T07:46:43Z, the reference point of the hot ranking
HOT_EPOCH_OFFSET = 1134028003
HOT_DECAY_SECONDS = 45000


def confidence_score(up: int, down: int, z: float, min_votes: int = 0) -> float:
    """Lower bound of the Wilson score interval for the upvote proportion.

    Args:
        up: Number of upvotes
        down: Number of downvotes
        z: z-score of the one-sided confidence level
        min_votes: Totals below this score 0

    Returns:
        Score in [0, up / total]; 0 when there are no or too few votes

    Raises:
        ValueError: If either count is negative
    """
    if up < 0 or down < 0:
        raise ValueError("Vote counts must be non-negative")

    total = up + down
    if total == 0 or total < min_votes:
        return 0.0

    p = up / total
    z2 = z * z
    center = p + z2 / (2 * total)
    spread = z * math.sqrt(p * (1 - p) / total + z2 / (4 * total * total))
    denom = 1 + z2 / total
    # Rounding can leave a tiny negative value when up == 0
    return max(0.0, (center - spread) / denom)


def hot_score(up: int, down: int, created_at: datetime) -> float:
    """Time-weighted ranking value.

    Every tenfold increase in net votes is worth as much as
    HOT_DECAY_SECONDS (12.5 hours) of recency.

    Args:
        up: Number of upvotes
        down: Number of downvotes
        created_at: Creation time; naive values are taken as UTC

    Returns:
        Hot score rounded to 7 decimal places
    """
    if up < 0 or down < 0:
        raise ValueError("Vote counts must be non-negative")

    net = up - down
    order = math.log10(max(abs(net), 1))
    sign = (net > 0) - (net < 0)

    if created_at.tzinfo is None:
        created_at = created_at.replace(tzinfo=timezone.utc)
    seconds = created_at.timestamp() - HOT_EPOCH_OFFSET

    return round(sign * order + seconds / HOT_DECAY_SECONDS, 7)


class ScoreEngine(Service):
    """Scores resources with the configured ranking policy."""

    def __init__(self, ranking_settings: RankingSettings) -> None:
        """Initialize score engine.

        Args:
            ranking_settings: Threshold and z-score configuration
        """
        self.min_votes = ranking_settings.min_votes
        self.z_score = ranking_settings.z_score

    def score(self, up: int, down: int) -> float:
        """Confidence score gated by the minimum-sample threshold."""
        return confidence_score(up, down, z=self.z_score, min_votes=self.min_votes)

    def hot(self, up: int, down: int, created_at: datetime) -> float:
        """Hot score for a resource created at ``created_at``."""
        return hot_score(up, down, created_at)
