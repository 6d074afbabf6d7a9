"""
Reputation Scoring - Main Scorer.

============================================================
PURPOSE
============================================================
The ReputationScorer is the single entry point for turning
verified social metrics into a reputation score.

It orchestrates:
1. Input normalisation
2. Individual component scoring
3. Score aggregation and clamping
4. Result packaging

Collateral ratio and interest rate are derived from the
final score alone.

============================================================
DESIGN PRINCIPLES
============================================================
- Total: no input combination raises
- Deterministic and stateless per call
- Constant time, no I/O
- Safe to share between threads

============================================================
USAGE
============================================================
    from reputation_scoring import ReputationScorer, SocialMetrics

    scorer = ReputationScorer()

    result = scorer.score(SocialMetrics(
        follower_count=1500,
        following_count=300,
        engagement_rate=250,
        account_age_days=730,
    ))

    print(result.value)                      # 730
    print(result.collateral_ratio_percent)   # 97.0
    print(result.interest_rate_apr_percent)  # 10

============================================================
"""

import logging
from decimal import Decimal
from typing import Any, List, Optional

from .types import (
    ComponentScore,
    ReputationScore,
    ReputationTier,
    SocialMetrics,
    clamp_score,
)
from .config import LoanTermsConfig, ReputationScoringConfig
from .scorers import (
    AccountAgeScorer,
    EngagementScorer,
    FollowerScorer,
    FollowRatioScorer,
)

logger = logging.getLogger(__name__)


class ReputationScorer:
    """
    Main orchestrator for reputation scoring.

    Holds only immutable configuration and its component scorers,
    so one instance can serve any number of concurrent callers.
    """

    def __init__(self, config: Optional[ReputationScoringConfig] = None):
        """
        Initialize the scorer.

        Args:
            config: Scoring configuration. Uses defaults if not provided.
        """
        self.config = config or ReputationScoringConfig()

        self._scorers = [
            FollowerScorer(self.config.followers),
            EngagementScorer(self.config.engagement),
            AccountAgeScorer(self.config.account_age),
            FollowRatioScorer(self.config.follow_ratio),
        ]

    def score(self, metrics: Any) -> ReputationScore:
        """
        Compute a reputation score.

        Args:
            metrics: SocialMetrics, or a mapping with the same keys
                     coming from an untrusted source

        Returns:
            ReputationScore with value in [0, max_score]
        """
        metrics = self._normalise(metrics)

        components: List[ComponentScore] = [
            scorer.score(metrics) for scorer in self._scorers
        ]

        total = sum(component.points for component in components)
        value = min(total, self.config.max_score)

        logger.debug(
            f"Scored metrics {metrics.to_dict()}: total={total} value={value}"
        )

        return ReputationScore(value=value, components=components)

    def _normalise(self, metrics: Any) -> SocialMetrics:
        if isinstance(metrics, SocialMetrics):
            return metrics

        if isinstance(metrics, dict):
            return SocialMetrics.from_raw(
                follower_count=metrics.get("follower_count", metrics.get("followerCount")),
                following_count=metrics.get("following_count", metrics.get("followingCount")),
                engagement_rate=metrics.get("engagement_rate", metrics.get("engagementRate")),
                account_age_days=metrics.get("account_age_days", metrics.get("accountAgeDays")),
            )

        logger.warning(f"Unsupported metrics type {type(metrics).__name__}, scoring as empty")
        return SocialMetrics()

    def get_config(self) -> ReputationScoringConfig:
        """Return the current scorer configuration."""
        return self.config


# ============================================================
# DERIVED TERMS
# ============================================================


def collateral_ratio_percent(score: Any, config: Optional[LoanTermsConfig] = None) -> Decimal:
    """
    Collateral required as a percentage of the loan principal.

    Piecewise linear and non-increasing in score:
    - 800+: 50-70%
    - 500-799: 90-120%
    - below 500: 130-150%, capped at 150%

    Args:
        score: Reputation score, clamped to [0, 1000]
        config: Loan terms configuration

    Returns:
        Collateral ratio percentage
    """
    config = config or LoanTermsConfig()
    score = clamp_score(score)
    step = config.collateral_step_percent

    if score >= config.high_score_threshold:
        return config.high_collateral_base_percent + (1000 - score) * step
    if score >= config.medium_score_threshold:
        return config.medium_collateral_base_percent + (config.high_score_threshold - score) * step

    ratio = config.low_collateral_base_percent + (config.medium_score_threshold - score) * step
    return min(ratio, config.max_collateral_percent)


def interest_rate_apr_percent(score: Any, config: Optional[LoanTermsConfig] = None) -> int:
    """
    Annual interest rate for a score: 5, 10 or 15 percent.
    """
    config = config or LoanTermsConfig()
    score = clamp_score(score)

    if score >= config.high_score_threshold:
        return config.high_apr_percent
    if score >= config.medium_score_threshold:
        return config.medium_apr_percent
    return config.low_apr_percent


# ============================================================
# CONVENIENCE FUNCTIONS
# ============================================================


_default_scorer = ReputationScorer()


def compute_score(metrics: Any) -> ReputationScore:
    """
    Score metrics with the default configuration.

    For a custom configuration, create a ReputationScorer.
    """
    return _default_scorer.score(metrics)


def get_reputation_tier(score: Any) -> ReputationTier:
    """Get the display tier for a score."""
    return ReputationTier.from_score(score)


def format_reputation_summary(result: ReputationScore) -> str:
    """
    Format a human-readable reputation summary.

    Useful for logging and support tooling.
    """
    lines = [
        "=" * 50,
        "REPUTATION SUMMARY",
        "=" * 50,
        f"Score: {result.value}/1000 ({result.tier.label})",
        f"Collateral Ratio: {result.collateral_ratio_percent}%",
        f"Interest Rate: {result.interest_rate_apr_percent}% APR",
        "",
        "Component Breakdown:",
    ]

    for component in result.components:
        name = component.component.value.replace("_", " ").title()
        lines.append(f"  {name:<14} {component.points:>3}/{component.max_points:<3} {component.reason}")

    lines.append("=" * 50)

    return "\n".join(lines)
