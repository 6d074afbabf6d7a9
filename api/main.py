"""
Reputation API - Application.

============================================================
RESPONSIBILITY
============================================================
Builds the FastAPI application: CORS, rate limiting, routers,
health and root endpoints.
============================================================
"""

import logging
from datetime import datetime, timezone
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.config import ApiConfig
from api.rate_limit import RequestRateLimiter, build_rate_limit_middleware
from api.routers import loans, reclaim, reputation
from api.schemas import HealthResponse, RootResponse
from reputation_scoring import (
    InMemoryReputationRepository,
    ReputationRepository,
    ReputationScorer,
    ReputationScoringConfig,
)
from verification import PermissiveProofVerifier, ProofVerifier, VerificationService

logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"


def create_app(
    config: Optional[ApiConfig] = None,
    repository: Optional[ReputationRepository] = None,
    verifier: Optional[ProofVerifier] = None,
    scoring_config: Optional[ReputationScoringConfig] = None,
) -> FastAPI:
    """
    Create the reputation API application.

    Args:
        config: Service configuration (defaults to environment)
        repository: Reputation store (defaults to in-memory)
        verifier: Proof verifier (defaults to the permissive verifier)
        scoring_config: Scoring thresholds (defaults to canonical tables)
    """
    config = config or ApiConfig.from_env()

    app = FastAPI(
        title="Social Reputation API",
        description="Scores verified social-account attestations and derives loan terms.",
        version=API_VERSION,
    )

    app.state.config = config
    app.state.verification_service = VerificationService(
        repository=repository or InMemoryReputationRepository(),
        verifier=verifier or PermissiveProofVerifier(),
        scorer=ReputationScorer(scoring_config),
        default_account_age_days=config.default_account_age_days,
    )
    app.state.rate_limiter = RequestRateLimiter(
        max_requests=config.rate_limit_max_requests,
        window_seconds=config.rate_limit_window_seconds,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[config.frontend_url],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.middleware("http")(build_rate_limit_middleware(app.state.rate_limiter))

    app.include_router(reclaim.router)
    app.include_router(reputation.router)
    app.include_router(loans.router)

    @app.get("/", response_model=RootResponse, tags=["Root"])
    def root():
        """Service name and endpoint index."""
        return RootResponse(
            name="Social Reputation API",
            version=API_VERSION,
            endpoints={
                "callback": "POST /api/reclaim/callback",
                "reputation": "GET /api/reputation/{address}",
                "score": "POST /api/reputation/score",
                "loan_quote": "POST /api/loans/quote",
                "health": "GET /health",
            },
        )

    @app.get("/health", response_model=HealthResponse, tags=["Health"])
    def health_check():
        """Health check endpoint."""
        return HealthResponse(
            status="ok",
            timestamp=datetime.now(timezone.utc).isoformat(),
            environment=config.environment,
            stored_reputations=app.state.verification_service.repository.count(),
        )

    logger.info(f"Reputation API created (environment={config.environment})")
    logger.info(f"Callback URL: {config.callback_url}")

    return app
