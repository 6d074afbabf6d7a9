"""
Verification - Service Layer.

Business logic for the proof callback:
- Validate payload structure
- Verify authenticity through a ProofVerifier
- Extract social metrics
- Score and store the reputation
"""

import logging
from datetime import datetime, timezone
from typing import Any, Mapping, Optional

from reputation_scoring import (
    InMemoryReputationRepository,
    ReputationNotFoundError,
    ReputationRecord,
    ReputationRepository,
    ReputationScorer,
    ReputationScoringError,
)
from verification.extraction import (
    DEFAULT_ACCOUNT_AGE_DAYS,
    extract_social_metrics,
    extract_user_address,
)
from verification.verifier import PermissiveProofVerifier, ProofVerifier

logger = logging.getLogger(__name__)


# =============================================================
# ERRORS
# =============================================================

class VerificationError(ReputationScoringError):
    """Base exception for proof callback failures."""
    pass


class InvalidProofError(VerificationError):
    """Raised when the payload is not a well-formed proof."""
    pass


class ProofVerificationError(VerificationError):
    """Raised when the verifier rejects a proof."""

    def __init__(self, message: str, identifier: Optional[str] = None) -> None:
        super().__init__(message)
        self.identifier = identifier


# =============================================================
# SERVICE
# =============================================================

class VerificationService:
    """
    Turns verified attestations into stored reputation records.
    """

    def __init__(
        self,
        repository: Optional[ReputationRepository] = None,
        verifier: Optional[ProofVerifier] = None,
        scorer: Optional[ReputationScorer] = None,
        default_account_age_days: int = DEFAULT_ACCOUNT_AGE_DAYS,
    ):
        self.repository = repository or InMemoryReputationRepository()
        self.verifier = verifier or PermissiveProofVerifier()
        self.scorer = scorer or ReputationScorer()
        self.default_account_age_days = default_account_age_days

    def handle_callback(
        self,
        payload: Any,
        now: Optional[datetime] = None,
    ) -> ReputationRecord:
        """
        Process a proof callback payload.

        Args:
            payload: Decoded callback body
            now: Verification time (defaults to current UTC time)

        Returns:
            The stored ReputationRecord

        Raises:
            InvalidProofError: If the payload has no identifier
            ProofVerificationError: If the verifier rejects the proof
        """
        if not isinstance(payload, Mapping) or not payload.get("identifier"):
            logger.warning("Rejected callback: proof must include identifier")
            raise InvalidProofError("Proof must include identifier")

        identifier = str(payload["identifier"])

        if not self.verifier.verify(payload):
            logger.warning(f"Proof verification failed for: {identifier}")
            raise ProofVerificationError(
                "The provided proof could not be verified", identifier
            )

        now = now or datetime.now(timezone.utc)
        profile = extract_social_metrics(
            payload,
            default_account_age_days=self.default_account_age_days,
            now=now,
        )
        score = self.scorer.score(profile.metrics)

        record = ReputationRecord(
            identifier=identifier,
            metrics=profile.metrics,
            score=score,
            user_address=extract_user_address(payload),
            username=profile.username,
            verified=True,
            verified_at=now,
            raw_parameters=profile.raw_parameters,
        )
        self.repository.save(record)

        logger.info(
            f"Proof verified: identifier={identifier} address={record.user_address} "
            f"score={score.value}"
        )
        return record

    def get_reputation(self, address: str) -> ReputationRecord:
        """
        Latest verified reputation for a wallet address.

        Raises:
            ReputationNotFoundError: If nothing is stored for the address
        """
        record = self.repository.find_by_address(address)
        if record is None:
            raise ReputationNotFoundError(
                f"No verified reputation data for address {address}"
            )
        return record
