"""
Reputation Scoring - Component Scorers.

============================================================
PURPOSE
============================================================
Individual scorers for each reputation component.

Each scorer:
1. Takes normalised SocialMetrics
2. Applies tier-based logic
3. Returns a ComponentScore with points + explanation

============================================================
DESIGN PRINCIPLES
============================================================
- Pure functions: same input = same output
- No external state or side effects
- Integer floor arithmetic throughout
- Never raise: inputs are already non-negative integers

============================================================
SCORING LOGIC PATTERN
============================================================
For a tiered component:
    for threshold, points in tiers (descending):
        if metric >= threshold:
            award points
    otherwise:
        award floor(metric * lowest_points / lowest_threshold)

============================================================
"""

from abc import ABC, abstractmethod
from typing import Optional, Tuple

from .types import ComponentScore, ScoreComponent, SocialMetrics
from .config import (
    AccountAgeScoreConfig,
    EngagementScoreConfig,
    FollowerScoreConfig,
    FollowRatioScoreConfig,
    Tier,
)


# ============================================================
# BASE SCORER
# ============================================================


class BaseComponentScorer(ABC):
    """
    Abstract base class for component scorers.

    Provides the shared tier lookup with a linear tail.
    """

    @property
    @abstractmethod
    def component(self) -> ScoreComponent:
        """Return the score component this scorer handles."""
        pass

    @abstractmethod
    def score(self, metrics: SocialMetrics) -> ComponentScore:
        """Compute the points for this component."""
        pass

    def _tiered_points(self, value: int, tiers: Tuple[Tier, ...]) -> Tuple[int, Optional[int]]:
        """
        Look up points for a value in a descending tier table.

        Args:
            value: Non-negative metric value
            tiers: (threshold, points) pairs, highest threshold first

        Returns:
            (points, matched_threshold). matched_threshold is None when
            the value falls below every tier and the linear tail applied.
        """
        for threshold, points in tiers:
            if value >= threshold:
                return points, threshold

        base_threshold, base_points = tiers[-1]
        return (value * base_points) // base_threshold, None


# ============================================================
# FOLLOWER SCORER
# ============================================================


class FollowerScorer(BaseComponentScorer):
    """Score the follower count (max 300)."""

    def __init__(self, config: Optional[FollowerScoreConfig] = None):
        self.config = config or FollowerScoreConfig()

    @property
    def component(self) -> ScoreComponent:
        return ScoreComponent.FOLLOWERS

    def score(self, metrics: SocialMetrics) -> ComponentScore:
        points, threshold = self._tiered_points(metrics.follower_count, self.config.tiers)

        if threshold is None:
            reason = f"{metrics.follower_count} followers, scaled below {self.config.tiers[-1][0]}"
        else:
            reason = f"{metrics.follower_count} followers reaches the {threshold}+ tier"

        return ComponentScore(
            component=self.component,
            points=points,
            max_points=self.config.max_points,
            reason=reason,
            contributing_factors={"follower_count": metrics.follower_count},
        )


# ============================================================
# ENGAGEMENT SCORER
# ============================================================


class EngagementScorer(BaseComponentScorer):
    """Score the engagement rate in basis points (max 400)."""

    def __init__(self, config: Optional[EngagementScoreConfig] = None):
        self.config = config or EngagementScoreConfig()

    @property
    def component(self) -> ScoreComponent:
        return ScoreComponent.ENGAGEMENT

    def score(self, metrics: SocialMetrics) -> ComponentScore:
        points, threshold = self._tiered_points(metrics.engagement_rate, self.config.tiers)

        rate_pct = metrics.engagement_rate / 100
        if threshold is None:
            reason = f"Engagement {rate_pct:.2f}%, scaled below {self.config.tiers[-1][0]} bps"
        else:
            reason = f"Engagement {rate_pct:.2f}% reaches the {threshold}+ bps tier"

        return ComponentScore(
            component=self.component,
            points=points,
            max_points=self.config.max_points,
            reason=reason,
            contributing_factors={"engagement_rate_bps": metrics.engagement_rate},
        )


# ============================================================
# ACCOUNT AGE SCORER
# ============================================================


class AccountAgeScorer(BaseComponentScorer):
    """Score the account age in days (max 200)."""

    def __init__(self, config: Optional[AccountAgeScoreConfig] = None):
        self.config = config or AccountAgeScoreConfig()

    @property
    def component(self) -> ScoreComponent:
        return ScoreComponent.ACCOUNT_AGE

    def score(self, metrics: SocialMetrics) -> ComponentScore:
        points, threshold = self._tiered_points(metrics.account_age_days, self.config.tiers)

        if threshold is None:
            reason = f"Account {metrics.account_age_days} days old, scaled below {self.config.tiers[-1][0]}"
        else:
            reason = f"Account {metrics.account_age_days} days old reaches the {threshold}+ tier"

        return ComponentScore(
            component=self.component,
            points=points,
            max_points=self.config.max_points,
            reason=reason,
            contributing_factors={"account_age_days": metrics.account_age_days},
        )


# ============================================================
# FOLLOW RATIO SCORER
# ============================================================


class FollowRatioScorer(BaseComponentScorer):
    """
    Score the follower/following ratio (max 100).

    ============================================================
    ZERO FOLLOWING
    ============================================================
    ratio = followers * 100 / following is undefined when the
    account follows nobody. That case awards the top tier.

    ============================================================
    """

    def __init__(self, config: Optional[FollowRatioScoreConfig] = None):
        self.config = config or FollowRatioScoreConfig()

    @property
    def component(self) -> ScoreComponent:
        return ScoreComponent.FOLLOW_RATIO

    def score(self, metrics: SocialMetrics) -> ComponentScore:
        if metrics.following_count == 0:
            return ComponentScore(
                component=self.component,
                points=self.config.zero_following_points,
                max_points=self.config.max_points,
                reason="Account follows nobody, top ratio tier",
                contributing_factors={
                    "follower_count": metrics.follower_count,
                    "following_count": 0,
                    "ratio": None,
                },
            )

        # Thresholds are integers, so floor division does not move any boundary
        ratio = (metrics.follower_count * 100) // metrics.following_count

        points = self.config.floor_points
        reason = f"Ratio {ratio / 100:.2f}:1 below every tier"
        for threshold, tier_points in self.config.tiers:
            if ratio >= threshold:
                points = tier_points
                reason = f"Ratio {ratio / 100:.2f}:1 reaches the {threshold / 100:g}:1 tier"
                break

        return ComponentScore(
            component=self.component,
            points=points,
            max_points=self.config.max_points,
            reason=reason,
            contributing_factors={
                "follower_count": metrics.follower_count,
                "following_count": metrics.following_count,
                "ratio": ratio,
            },
        )
