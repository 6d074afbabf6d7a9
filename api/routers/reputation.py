"""
FastAPI Router for reputation lookup and scoring.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from api.routers.deps import get_scorer, get_verification_service
from api.schemas import (
    ComponentScoreOut,
    ReputationData,
    ReputationResponse,
    ReputationScoreOut,
    ScoreResponse,
    SocialMetricsIn,
    SocialMetricsOut,
)
from reputation_scoring import (
    ReputationNotFoundError,
    ReputationScore,
    ReputationScorer,
    SocialMetrics,
)
from verification import VerificationService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/reputation", tags=["Reputation"])


def reputation_score_out(score: ReputationScore) -> ReputationScoreOut:
    return ReputationScoreOut(
        score=score.value,
        tier=score.tier.value,
        collateral_ratio_percent=float(score.collateral_ratio_percent),
        interest_rate_apr_percent=score.interest_rate_apr_percent,
        components=[
            ComponentScoreOut(
                component=item.component.value,
                points=item.points,
                max_points=item.max_points,
                reason=item.reason,
            )
            for item in score.components
        ],
    )


def metrics_out(metrics: SocialMetrics) -> SocialMetricsOut:
    return SocialMetricsOut(**metrics.to_dict())


@router.post("/score", response_model=ScoreResponse)
def calculate_score(
    body: SocialMetricsIn,
    scorer: ReputationScorer = Depends(get_scorer),
):
    """
    Score raw metrics without storing anything.
    """
    metrics = SocialMetrics.from_raw(
        follower_count=body.follower_count,
        following_count=body.following_count,
        engagement_rate=body.engagement_rate,
        account_age_days=body.account_age_days,
    )
    score = scorer.score(metrics)

    return ScoreResponse(
        success=True,
        metrics=metrics_out(metrics),
        reputation=reputation_score_out(score),
    )


@router.get("/{address}", response_model=ReputationResponse)
def get_reputation(
    address: str,
    service: VerificationService = Depends(get_verification_service),
):
    """
    Get the latest verified reputation for a wallet address.
    """
    try:
        record = service.get_reputation(address)
    except ReputationNotFoundError:
        logger.info(f"No reputation stored for {address}")
        raise HTTPException(
            status_code=404,
            detail={
                "error": "Reputation not found",
                "message": "No verified reputation data for this address",
            },
        )

    validity_days = service.scorer.config.loan_terms.validity_period_days

    return ReputationResponse(
        success=True,
        data=ReputationData(
            verified=record.verified,
            verified_at=record.verified_at,
            expired=record.is_expired(validity_days),
            username=record.username,
            user_address=record.user_address,
            metrics=metrics_out(record.metrics),
            reputation=reputation_score_out(record.score),
        ),
    )
