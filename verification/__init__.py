"""
Verification Package.

Collaborators that feed the reputation scorer:
- extraction: metrics from attestation payloads
- verifier: pluggable proof authenticity check
- service: callback processing and reputation lookup
"""

from verification.extraction import (
    DEFAULT_ACCOUNT_AGE_DAYS,
    ExtractedProfile,
    calculate_account_age_days,
    calculate_engagement_rate,
    extract_social_metrics,
    extract_user_address,
    parse_claim_context,
)
from verification.verifier import PermissiveProofVerifier, ProofVerifier
from verification.service import (
    InvalidProofError,
    ProofVerificationError,
    VerificationError,
    VerificationService,
)

__all__ = [
    "DEFAULT_ACCOUNT_AGE_DAYS",
    "ExtractedProfile",
    "calculate_account_age_days",
    "calculate_engagement_rate",
    "extract_social_metrics",
    "extract_user_address",
    "parse_claim_context",
    "PermissiveProofVerifier",
    "ProofVerifier",
    "InvalidProofError",
    "ProofVerificationError",
    "VerificationError",
    "VerificationService",
]
