"""
Shared fixtures for attestation payloads.
"""

import json

import pytest


WALLET_ADDRESS = "0xAbCdEf0123456789aBCdEF0123456789AbCdEf01"


def make_proof(
    identifier="proof-123",
    params=None,
    user_address=WALLET_ADDRESS,
    context_as_string=True,
):
    """Build a callback payload shaped like the attestation SDK's output."""
    if params is None:
        params = {
            "followers_count": "1500",
            "friends_count": "300",
            "name": "alice",
        }

    claim_context = {
        "contextAddress": "0x0",
        "contextMessage": "",
        "extractedParameters": params,
        "providerHash": "0xprovider",
    }

    proof = {
        "identifier": identifier,
        "claimData": {
            "provider": "http",
            "context": json.dumps(claim_context) if context_as_string else claim_context,
            "owner": "0xowner",
        },
        "signatures": ["0xsig"],
    }
    if user_address is not None:
        proof["context"] = {"userAddress": user_address}
    return proof


@pytest.fixture
def proof_factory():
    return make_proof


@pytest.fixture
def sample_proof():
    return make_proof()
