"""
Verification - Proof Verifiers.

Cryptographic verification of attestations is delegated to an
external implementation of ProofVerifier. PermissiveProofVerifier
accepts every structurally valid proof and must be replaced
before production use.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Mapping

logger = logging.getLogger(__name__)


class ProofVerifier(ABC):
    """Checks that an attestation payload is authentic."""

    @abstractmethod
    def verify(self, proof: Mapping[str, Any]) -> bool:
        """Return True when the proof is authentic."""
        pass


class PermissiveProofVerifier(ProofVerifier):
    """Accepts every proof. Development only."""

    def verify(self, proof: Mapping[str, Any]) -> bool:
        logger.warning(
            f"Proof {proof.get('identifier')} accepted without cryptographic verification"
        )
        return True
