"""
Reputation Scoring - Package.

============================================================
PURPOSE
============================================================
Computes a bounded social reputation score from verified
social-account metrics and derives loan terms from it.

This is the single canonical implementation of the scoring
rules. API handlers and any UI layer call it instead of
re-deriving the math.

============================================================
WHAT IT IS
============================================================
- Deterministic, tier-based scoring
- Total: malformed input is normalised, never raised
- Stateless per call

============================================================
WHAT IT IS NOT
============================================================
- NOT a proof verifier
- NOT a durable store
- NOT a loan executor

============================================================
FOUR SCORE COMPONENTS
============================================================
1. FOLLOWERS: follower count (max 300)
2. ENGAGEMENT: engagement rate in basis points (max 400)
3. ACCOUNT_AGE: account age in days (max 200)
4. FOLLOW_RATIO: follower/following ratio (max 100)

Total: 0-1000

============================================================
USAGE
============================================================
    from reputation_scoring import compute_score, SocialMetrics

    result = compute_score(SocialMetrics(
        follower_count=10000,
        following_count=20,
        engagement_rate=500,
        account_age_days=1095,
    ))

    print(result.value)                      # 1000
    print(result.collateral_ratio_percent)   # 50.0
    print(result.interest_rate_apr_percent)  # 5

============================================================
"""

# Types
from .types import (
    MAX_SCORE,
    MAX_METRIC_VALUE,
    MIN_SCORE,
    # Enums
    ScoreComponent,
    ReputationTier,

    # Input types
    SocialMetrics,

    # Output types
    ComponentScore,
    ReputationScore,
    LoanQuote,
    ReputationRecord,

    # Helpers
    coerce_non_negative_int,
    clamp_score,

    # Exceptions
    ReputationScoringError,
    LoanQuoteError,
    ReputationNotFoundError,
)

# Configuration
from .config import (
    FollowerScoreConfig,
    EngagementScoreConfig,
    AccountAgeScoreConfig,
    FollowRatioScoreConfig,
    LoanTermsConfig,
    ReputationScoringConfig,
    get_default_config,
)

# Scorers
from .scorers import (
    BaseComponentScorer,
    FollowerScorer,
    EngagementScorer,
    AccountAgeScorer,
    FollowRatioScorer,
)

# Engine
from .engine import (
    ReputationScorer,
    compute_score,
    collateral_ratio_percent,
    interest_rate_apr_percent,
    get_reputation_tier,
    format_reputation_summary,
)

# Loan terms
from .loan_terms import (
    is_eligible_to_borrow,
    required_collateral,
    calculate_repayment,
    quote_loan,
)

# Persistence
from .repository import (
    ReputationRepository,
    InMemoryReputationRepository,
)


__all__ = [
    "MAX_SCORE",
    "MAX_METRIC_VALUE",
    "MIN_SCORE",

    # Enums
    "ScoreComponent",
    "ReputationTier",

    # Input types
    "SocialMetrics",

    # Output types
    "ComponentScore",
    "ReputationScore",
    "LoanQuote",
    "ReputationRecord",

    # Helpers
    "coerce_non_negative_int",
    "clamp_score",

    # Exceptions
    "ReputationScoringError",
    "LoanQuoteError",
    "ReputationNotFoundError",

    # Configuration
    "FollowerScoreConfig",
    "EngagementScoreConfig",
    "AccountAgeScoreConfig",
    "FollowRatioScoreConfig",
    "LoanTermsConfig",
    "ReputationScoringConfig",
    "get_default_config",

    # Scorers
    "BaseComponentScorer",
    "FollowerScorer",
    "EngagementScorer",
    "AccountAgeScorer",
    "FollowRatioScorer",

    # Engine
    "ReputationScorer",
    "compute_score",
    "collateral_ratio_percent",
    "interest_rate_apr_percent",
    "get_reputation_tier",
    "format_reputation_summary",

    # Loan terms
    "is_eligible_to_borrow",
    "required_collateral",
    "calculate_repayment",
    "quote_loan",

    # Persistence
    "ReputationRepository",
    "InMemoryReputationRepository",
]


__version__ = "1.0.0"
