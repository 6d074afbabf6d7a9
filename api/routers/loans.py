"""
FastAPI Router for loan quotes.
"""

from fastapi import APIRouter, Depends, HTTPException

from api.routers.deps import get_scorer
from api.schemas import LoanQuoteOut, LoanQuoteRequest, LoanQuoteResponse
from reputation_scoring import LoanQuoteError, ReputationScorer, quote_loan

router = APIRouter(prefix="/api/loans", tags=["Loans"])


@router.post("/quote", response_model=LoanQuoteResponse)
def get_loan_quote(
    body: LoanQuoteRequest,
    scorer: ReputationScorer = Depends(get_scorer),
):
    """
    Quote collateral, interest and repayment for a loan request.
    """
    try:
        quote = quote_loan(
            principal=body.principal,
            duration_days=body.duration_days,
            score=body.score,
            config=scorer.config.loan_terms,
        )
    except LoanQuoteError as e:
        raise HTTPException(
            status_code=400,
            detail={"error": "Loan terms unavailable", "message": str(e), "field": e.field_name},
        )

    return LoanQuoteResponse(success=True, data=LoanQuoteOut(**quote.to_dict()))
