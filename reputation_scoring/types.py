"""
Reputation Scoring - Type Definitions.

============================================================
PURPOSE
============================================================
Data contracts for the Reputation Scoring Engine.

This module defines the types, enums, and dataclasses used
by the scorer, the loan-term helpers and the reputation
store.

============================================================
DESIGN PRINCIPLES
============================================================
- All types are immutable
- Inputs are normalised on construction from raw values
- Clear separation between input and output types

============================================================
SCORE COMPONENTS
============================================================
The engine evaluates exactly four components:

1. FOLLOWERS     - max 300 points
2. ENGAGEMENT    - max 400 points
3. ACCOUNT_AGE   - max 200 points
4. FOLLOW_RATIO  - max 100 points

Total is the sum, clamped to 1000.

============================================================
"""

import math
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from decimal import ROUND_FLOOR, Decimal, InvalidOperation
from enum import Enum
from typing import Any, Dict, List, Optional


MIN_SCORE = 0
MAX_SCORE = 1000

# Saturation ceiling for metric values, far above every tier threshold
MAX_METRIC_VALUE = 10 ** 15
MAX_METRIC_DIGITS = 15


# ============================================================
# INPUT NORMALISATION
# ============================================================


def coerce_non_negative_int(value: Any) -> int:
    """
    Normalise an untrusted metric value to a non-negative integer.

    Negative, non-finite, boolean, missing and non-numeric values
    become 0. Finite fractional values are floored. Numeric strings
    are parsed. Values above MAX_METRIC_VALUE saturate at it, so
    huge inputs cost no more than small ones.
    """
    if value is None or isinstance(value, bool):
        return 0

    if isinstance(value, int):
        if value <= 0:
            return 0
        return min(value, MAX_METRIC_VALUE)

    if isinstance(value, float):
        if not math.isfinite(value) or value <= 0:
            return 0
        if value >= MAX_METRIC_VALUE:
            return MAX_METRIC_VALUE
        return math.floor(value)

    if isinstance(value, Decimal):
        if not value.is_finite() or value <= 0:
            return 0
        # adjusted() is the exponent of the leading digit
        if value.adjusted() >= MAX_METRIC_DIGITS:
            return MAX_METRIC_VALUE
        return int(value.to_integral_value(rounding=ROUND_FLOOR))

    if isinstance(value, str):
        try:
            parsed = Decimal(value.strip())
        except InvalidOperation:
            return 0
        return coerce_non_negative_int(parsed)

    return 0


def clamp_score(value: Any) -> int:
    """Normalise a score value and clamp it to [0, 1000]."""
    return min(coerce_non_negative_int(value), MAX_SCORE)


# ============================================================
# ENUMS
# ============================================================


class ScoreComponent(str, Enum):
    """
    The four components that make up a reputation score.
    """

    FOLLOWERS = "followers"
    ENGAGEMENT = "engagement"
    ACCOUNT_AGE = "account_age"
    FOLLOW_RATIO = "follow_ratio"

    @classmethod
    def all_components(cls) -> List["ScoreComponent"]:
        """Return all components in evaluation order."""
        return [cls.FOLLOWERS, cls.ENGAGEMENT, cls.ACCOUNT_AGE, cls.FOLLOW_RATIO]


class ReputationTier(str, Enum):
    """
    Display category for a reputation score.

    - EXCELLENT: 800+
    - GOOD: 600-799
    - FAIR: 400-599
    - POOR: 300-399
    - INSUFFICIENT: below 300
    """

    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"
    INSUFFICIENT = "insufficient"

    @classmethod
    def from_score(cls, score: int) -> "ReputationTier":
        """
        Classify a score into a tier.

        Args:
            score: Reputation score (0-1000)

        Returns:
            Matching ReputationTier
        """
        score = clamp_score(score)
        if score >= 800:
            return cls.EXCELLENT
        elif score >= 600:
            return cls.GOOD
        elif score >= 400:
            return cls.FAIR
        elif score >= 300:
            return cls.POOR
        else:
            return cls.INSUFFICIENT

    @property
    def label(self) -> str:
        """Human-readable label for the tier."""
        return self.value.capitalize()


# ============================================================
# INPUT DATA CONTRACTS
# ============================================================


@dataclass(frozen=True)
class SocialMetrics:
    """
    Verified social-account metrics fed into the scorer.

    All fields are non-negative integers. Use `from_raw` when the
    values come from an untrusted source.
    """

    follower_count: int = 0
    following_count: int = 0

    # Basis points, 10000 = 100%
    engagement_rate: int = 0

    account_age_days: int = 0

    def __post_init__(self) -> None:
        for name in ("follower_count", "following_count", "engagement_rate", "account_age_days"):
            object.__setattr__(self, name, coerce_non_negative_int(getattr(self, name)))

    @classmethod
    def from_raw(
        cls,
        follower_count: Any = 0,
        following_count: Any = 0,
        engagement_rate: Any = 0,
        account_age_days: Any = 0,
    ) -> "SocialMetrics":
        """Build metrics from untrusted values, normalising each one."""
        return cls(
            follower_count=coerce_non_negative_int(follower_count),
            following_count=coerce_non_negative_int(following_count),
            engagement_rate=coerce_non_negative_int(engagement_rate),
            account_age_days=coerce_non_negative_int(account_age_days),
        )

    def to_dict(self) -> Dict[str, int]:
        return {
            "follower_count": self.follower_count,
            "following_count": self.following_count,
            "engagement_rate": self.engagement_rate,
            "account_age_days": self.account_age_days,
        }


# ============================================================
# OUTPUT DATA CONTRACTS
# ============================================================


@dataclass(frozen=True)
class ComponentScore:
    """
    Points awarded for a single score component.

    Contains the points, the component ceiling and an explanation
    for transparency.
    """

    component: ScoreComponent
    points: int
    max_points: int
    reason: str
    contributing_factors: Dict[str, Any] = field(default_factory=dict)

    @property
    def is_maxed(self) -> bool:
        return self.points >= self.max_points


@dataclass(frozen=True)
class ReputationScore:
    """
    Complete output from the Reputation Scoring Engine.

    ============================================================
    OUTPUT GUARANTEES
    ============================================================
    - value: Always 0-1000
    - collateral_ratio_percent and interest_rate_apr_percent
      depend on value alone
    - All four components present when produced by the engine

    ============================================================
    """

    value: int = 0
    components: List[ComponentScore] = field(default_factory=list)

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", clamp_score(self.value))

    @property
    def collateral_ratio_percent(self) -> Decimal:
        from .engine import collateral_ratio_percent
        return collateral_ratio_percent(self.value)

    @property
    def interest_rate_apr_percent(self) -> int:
        from .engine import interest_rate_apr_percent
        return interest_rate_apr_percent(self.value)

    @property
    def tier(self) -> ReputationTier:
        return ReputationTier.from_score(self.value)

    def get_component(self, component: ScoreComponent) -> Optional[ComponentScore]:
        """Get the points breakdown for a specific component."""
        for item in self.components:
            if item.component == component:
                return item
        return None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "score": self.value,
            "tier": self.tier.value,
            "collateral_ratio_percent": float(self.collateral_ratio_percent),
            "interest_rate_apr_percent": self.interest_rate_apr_percent,
            "components": {
                item.component.value: {
                    "points": item.points,
                    "max_points": item.max_points,
                    "reason": item.reason,
                    "factors": item.contributing_factors,
                }
                for item in self.components
            },
        }


@dataclass(frozen=True)
class LoanQuote:
    """
    Loan terms derived from a reputation score.

    Money values are Decimals rounded to cents.
    """

    principal: Decimal
    duration_days: int
    score: int
    interest_rate_apr_percent: int
    collateral_ratio_percent: Decimal
    required_collateral: Decimal
    interest: Decimal
    total_repayment: Decimal

    def to_dict(self) -> Dict[str, Any]:
        return {
            "principal": float(self.principal),
            "duration_days": self.duration_days,
            "score": self.score,
            "interest_rate_apr_percent": self.interest_rate_apr_percent,
            "collateral_ratio_percent": float(self.collateral_ratio_percent),
            "required_collateral": float(self.required_collateral),
            "interest": float(self.interest),
            "total_repayment": float(self.total_repayment),
        }


# ============================================================
# STORED RECORD
# ============================================================


@dataclass(frozen=True)
class ReputationRecord:
    """
    A verified reputation kept by the reputation store.

    Keyed by the attestation identifier; optionally linked to a
    wallet address.
    """

    identifier: str
    metrics: SocialMetrics
    score: ReputationScore
    user_address: Optional[str] = None
    username: str = "unknown"
    verified: bool = True
    verified_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    raw_parameters: Dict[str, Any] = field(default_factory=dict)

    def is_expired(self, validity_period_days: int = 30, now: Optional[datetime] = None) -> bool:
        """Check whether the verification is older than the validity period."""
        now = now or datetime.now(timezone.utc)
        return now - self.verified_at > timedelta(days=validity_period_days)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "identifier": self.identifier,
            "user_address": self.user_address,
            "username": self.username,
            "verified": self.verified,
            "verified_at": self.verified_at.isoformat(),
            "metrics": self.metrics.to_dict(),
            "reputation": self.score.to_dict(),
        }


# ============================================================
# ERROR TYPES
# ============================================================


class ReputationScoringError(Exception):
    """Base exception for reputation scoring errors."""
    pass


class LoanQuoteError(ReputationScoringError):
    """Raised when loan terms cannot be quoted for the request."""

    def __init__(self, message: str, field_name: Optional[str] = None) -> None:
        super().__init__(message)
        self.field_name = field_name


class ReputationNotFoundError(ReputationScoringError):
    """Raised when no verified reputation exists for a lookup key."""
    pass
