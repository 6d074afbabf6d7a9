"""
Reputation Scoring - Configuration.

============================================================
PURPOSE
============================================================
Defines the configuration dataclasses and threshold tables
for the Reputation Scoring Engine and the loan-term helpers.

============================================================
THRESHOLD PHILOSOPHY
============================================================
Each component is a descending list of (threshold, points)
tiers. The first tier whose threshold the metric reaches
awards its points. Below the lowest tier the component is
scaled linearly with integer floor division:

    points = floor(metric * base_points / base_threshold)

The follow ratio component has no linear tail: it awards a
fixed floor value below its lowest tier.

============================================================
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Dict, Tuple


Tier = Tuple[int, int]


# ============================================================
# FOLLOWER COMPONENT
# ============================================================


@dataclass(frozen=True)
class FollowerScoreConfig:
    """
    Configuration for the follower count component (max 300).

    - 10000+ followers: 300
    - 5000+ followers: 250
    - 1000+ followers: 200
    - otherwise: floor(followers * 200 / 1000)
    """

    tiers: Tuple[Tier, ...] = ((10000, 300), (5000, 250), (1000, 200))
    max_points: int = 300

    def to_dict(self) -> Dict[str, Any]:
        return {
            "tiers": [list(tier) for tier in self.tiers],
            "max_points": self.max_points,
        }


# ============================================================
# ENGAGEMENT COMPONENT
# ============================================================


@dataclass(frozen=True)
class EngagementScoreConfig:
    """
    Configuration for the engagement rate component (max 400).

    Engagement rate is expressed in basis points.

    - 500+ bps (5%): 400
    - 300+ bps (3%): 350
    - 100+ bps (1%): 250
    - otherwise: floor(rate * 250 / 100)
    """

    tiers: Tuple[Tier, ...] = ((500, 400), (300, 350), (100, 250))
    max_points: int = 400

    def to_dict(self) -> Dict[str, Any]:
        return {
            "tiers": [list(tier) for tier in self.tiers],
            "max_points": self.max_points,
        }


# ============================================================
# ACCOUNT AGE COMPONENT
# ============================================================


@dataclass(frozen=True)
class AccountAgeScoreConfig:
    """
    Configuration for the account age component (max 200).

    - 1095+ days (3y): 200
    - 730+ days (2y): 180
    - 365+ days (1y): 150
    - otherwise: floor(days * 150 / 365)
    """

    tiers: Tuple[Tier, ...] = ((1095, 200), (730, 180), (365, 150))
    max_points: int = 200

    def to_dict(self) -> Dict[str, Any]:
        return {
            "tiers": [list(tier) for tier in self.tiers],
            "max_points": self.max_points,
        }


# ============================================================
# FOLLOW RATIO COMPONENT
# ============================================================


@dataclass(frozen=True)
class FollowRatioScoreConfig:
    """
    Configuration for the follower/following ratio component (max 100).

    ratio = followers * 100 / following

    - ratio 500+ (5:1): 100
    - ratio 200+ (2:1): 80
    - otherwise: 60

    An account following nobody gets the top tier.
    """

    tiers: Tuple[Tier, ...] = ((500, 100), (200, 80))
    floor_points: int = 60
    zero_following_points: int = 100
    max_points: int = 100

    def to_dict(self) -> Dict[str, Any]:
        return {
            "tiers": [list(tier) for tier in self.tiers],
            "floor_points": self.floor_points,
            "zero_following_points": self.zero_following_points,
            "max_points": self.max_points,
        }


# ============================================================
# LOAN TERMS
# ============================================================


@dataclass(frozen=True)
class LoanTermsConfig:
    """
    Configuration for collateral, interest and loan bounds.

    ============================================================
    COLLATERAL RATIO (% of principal)
    ============================================================
    - score 800+: 50 + (1000 - score) * 0.1     -> 50-70%
    - score 500+: 90 + (800 - score) * 0.1      -> 90-120%
    - otherwise:  130 + (500 - score) * 0.1     -> 130-150%, capped

    ============================================================
    INTEREST RATE (APR %)
    ============================================================
    - score 800+: 5
    - score 500+: 10
    - otherwise:  15

    ============================================================
    """

    high_score_threshold: int = 800
    medium_score_threshold: int = 500

    collateral_step_percent: Decimal = Decimal("0.1")
    high_collateral_base_percent: Decimal = Decimal("50")
    medium_collateral_base_percent: Decimal = Decimal("90")
    low_collateral_base_percent: Decimal = Decimal("130")
    max_collateral_percent: Decimal = Decimal("150")

    high_apr_percent: int = 5
    medium_apr_percent: int = 10
    low_apr_percent: int = 15

    # Borrowing limits
    min_borrow_score: int = 300
    min_loan_amount: Decimal = Decimal("100")
    max_loan_amount: Decimal = Decimal("100000")
    min_duration_days: int = 7
    max_duration_days: int = 365

    # A verification is trusted for this long
    validity_period_days: int = 30

    def to_dict(self) -> Dict[str, Any]:
        return {
            "high_score_threshold": self.high_score_threshold,
            "medium_score_threshold": self.medium_score_threshold,
            "collateral_step_percent": str(self.collateral_step_percent),
            "high_collateral_base_percent": str(self.high_collateral_base_percent),
            "medium_collateral_base_percent": str(self.medium_collateral_base_percent),
            "low_collateral_base_percent": str(self.low_collateral_base_percent),
            "max_collateral_percent": str(self.max_collateral_percent),
            "high_apr_percent": self.high_apr_percent,
            "medium_apr_percent": self.medium_apr_percent,
            "low_apr_percent": self.low_apr_percent,
            "min_borrow_score": self.min_borrow_score,
            "min_loan_amount": str(self.min_loan_amount),
            "max_loan_amount": str(self.max_loan_amount),
            "min_duration_days": self.min_duration_days,
            "max_duration_days": self.max_duration_days,
            "validity_period_days": self.validity_period_days,
        }


# ============================================================
# MASTER CONFIGURATION
# ============================================================


@dataclass(frozen=True)
class ReputationScoringConfig:
    """
    Master configuration for the Reputation Scoring Engine.

    Aggregates all component configs and loan-term settings.
    """

    followers: FollowerScoreConfig = field(default_factory=FollowerScoreConfig)
    engagement: EngagementScoreConfig = field(default_factory=EngagementScoreConfig)
    account_age: AccountAgeScoreConfig = field(default_factory=AccountAgeScoreConfig)
    follow_ratio: FollowRatioScoreConfig = field(default_factory=FollowRatioScoreConfig)

    loan_terms: LoanTermsConfig = field(default_factory=LoanTermsConfig)

    max_score: int = 1000
    engine_version: str = "1.0.0"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "followers": self.followers.to_dict(),
            "engagement": self.engagement.to_dict(),
            "account_age": self.account_age.to_dict(),
            "follow_ratio": self.follow_ratio.to_dict(),
            "loan_terms": self.loan_terms.to_dict(),
            "max_score": self.max_score,
            "engine_version": self.engine_version,
        }


def get_default_config() -> ReputationScoringConfig:
    """
    Return the default Reputation Scoring Engine configuration.

    These are the canonical tables shared by every caller.
    """
    return ReputationScoringConfig()
