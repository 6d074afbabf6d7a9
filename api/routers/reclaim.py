"""
FastAPI Router for the proof callback.

The attestation provider posts the finished proof here once the
user completes verification.
"""

import json
import logging
from urllib.parse import unquote

from fastapi import APIRouter, Depends, HTTPException, Request

from api.routers.deps import get_verification_service
from api.schemas import CallbackResponse
from verification import InvalidProofError, ProofVerificationError, VerificationService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/reclaim", tags=["Proof Callback"])


async def _read_payload(request: Request):
    body = await request.body()
    text = body.decode("utf-8", errors="replace").strip()
    if not text:
        return None

    # Some SDK versions post the proof URL-encoded instead of as JSON
    if not text.startswith(("{", "[")):
        text = unquote(text)

    try:
        return json.loads(text)
    except ValueError:
        return None


@router.post("/callback", response_model=CallbackResponse)
async def proof_callback(
    request: Request,
    service: VerificationService = Depends(get_verification_service),
):
    """
    Receive a proof, verify it, score it and store the result.
    """
    logger.info("Received proof callback")
    payload = await _read_payload(request)

    try:
        record = service.handle_callback(payload)
    except InvalidProofError as e:
        raise HTTPException(
            status_code=400,
            detail={"error": "Invalid proof format", "message": str(e)},
        )
    except ProofVerificationError as e:
        raise HTTPException(
            status_code=400,
            detail={"error": "Proof verification failed", "message": str(e)},
        )
    except Exception as e:
        logger.error(f"Error processing proof: {e}")
        raise HTTPException(
            status_code=500,
            detail={"error": "Internal server error", "message": "Failed to process proof"},
        )

    return CallbackResponse(
        success=True,
        message="Proof verified successfully",
        identifier=record.identifier,
        score=record.score.value,
    )
