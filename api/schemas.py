"""
Pydantic schemas for the Reputation API.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


# =============================================================
# COMMON
# =============================================================

class BaseResponse(BaseModel):
    success: bool
    message: Optional[str] = None


class ErrorResponse(BaseModel):
    error: str
    message: str


# =============================================================
# SCORING
# =============================================================

class SocialMetricsIn(BaseModel):
    """
    Raw metrics for the stateless score calculator.

    Values are accepted as-is and normalised by the scorer, so
    negative or non-numeric values score as zero.
    """

    follower_count: Any = Field(0, description="Follower count")
    following_count: Any = Field(0, description="Following count")
    engagement_rate: Any = Field(0, description="Engagement rate in basis points (10000 = 100%)")
    account_age_days: Any = Field(0, description="Days since account creation")


class SocialMetricsOut(BaseModel):
    follower_count: int
    following_count: int
    engagement_rate: int
    account_age_days: int


class ComponentScoreOut(BaseModel):
    component: str
    points: int
    max_points: int
    reason: str


class ReputationScoreOut(BaseModel):
    score: int
    tier: str
    collateral_ratio_percent: float
    interest_rate_apr_percent: int
    components: List[ComponentScoreOut] = []


class ScoreResponse(BaseResponse):
    metrics: SocialMetricsOut
    reputation: ReputationScoreOut


# =============================================================
# PROOF CALLBACK
# =============================================================

class CallbackResponse(BaseResponse):
    identifier: str
    score: int


# =============================================================
# STORED REPUTATION
# =============================================================

class ReputationData(BaseModel):
    verified: bool
    verified_at: datetime
    expired: bool
    username: str
    user_address: Optional[str] = None
    metrics: SocialMetricsOut
    reputation: ReputationScoreOut


class ReputationResponse(BaseResponse):
    data: ReputationData


# =============================================================
# LOAN QUOTE
# =============================================================

class LoanQuoteRequest(BaseModel):
    principal: float = Field(..., gt=0, description="Requested principal")
    duration_days: int = Field(..., gt=0, description="Loan duration in days")
    score: int = Field(..., ge=0, le=1000, description="Borrower reputation score")


class LoanQuoteOut(BaseModel):
    principal: float
    duration_days: int
    score: int
    interest_rate_apr_percent: int
    collateral_ratio_percent: float
    required_collateral: float
    interest: float
    total_repayment: float


class LoanQuoteResponse(BaseResponse):
    data: LoanQuoteOut


# =============================================================
# HEALTH
# =============================================================

class HealthResponse(BaseModel):
    status: str
    timestamp: str
    environment: str
    stored_reputations: int = 0


class RootResponse(BaseModel):
    name: str
    version: str
    endpoints: Dict[str, str]
