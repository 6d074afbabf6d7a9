"""
Shared router dependencies.
"""

from fastapi import Request

from reputation_scoring import ReputationScorer
from verification import VerificationService


def get_verification_service(request: Request) -> VerificationService:
    return request.app.state.verification_service


def get_scorer(request: Request) -> ReputationScorer:
    return request.app.state.verification_service.scorer


