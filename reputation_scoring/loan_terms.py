"""
Reputation Scoring - Loan Terms.

Helpers that turn a reputation score into concrete loan terms:
required collateral, interest and total repayment.

Interest is simple interest on a 365-day year:

    interest = principal * apr * days / (365 * 100)
"""

import logging
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any, Optional

from .config import LoanTermsConfig
from .engine import collateral_ratio_percent, interest_rate_apr_percent
from .types import LoanQuote, LoanQuoteError, clamp_score

logger = logging.getLogger(__name__)

CENTS = Decimal("0.01")


def _to_decimal(value: Any, field_name: str) -> Decimal:
    try:
        amount = Decimal(str(value))
    except (InvalidOperation, ValueError) as e:
        raise LoanQuoteError(f"{field_name} is not a number: {value!r}", field_name) from e
    if not amount.is_finite():
        raise LoanQuoteError(f"{field_name} must be finite", field_name)
    return amount


def is_eligible_to_borrow(score: Any, config: Optional[LoanTermsConfig] = None) -> bool:
    """Check whether a score meets the minimum borrowing score."""
    config = config or LoanTermsConfig()
    return clamp_score(score) >= config.min_borrow_score


def required_collateral(
    principal: Any,
    score: Any,
    config: Optional[LoanTermsConfig] = None,
) -> Decimal:
    """
    Collateral to post for a principal at the given score.

    Args:
        principal: Loan principal
        score: Reputation score

    Returns:
        Collateral amount rounded to cents
    """
    amount = _to_decimal(principal, "principal")
    ratio = collateral_ratio_percent(score, config)
    return (amount * ratio / 100).quantize(CENTS, rounding=ROUND_HALF_UP)


def calculate_repayment(principal: Any, apr_percent: Any, duration_days: int) -> Decimal:
    """
    Total repayment (principal plus simple interest).

    Args:
        principal: Loan principal
        apr_percent: Annual interest rate in percent
        duration_days: Loan duration in days

    Returns:
        Principal plus interest, rounded to cents
    """
    amount = _to_decimal(principal, "principal")
    rate = _to_decimal(apr_percent, "apr_percent")
    interest = amount * rate * duration_days / Decimal(365 * 100)
    return (amount + interest).quantize(CENTS, rounding=ROUND_HALF_UP)


def quote_loan(
    principal: Any,
    duration_days: int,
    score: Any,
    config: Optional[LoanTermsConfig] = None,
) -> LoanQuote:
    """
    Quote full loan terms for a borrower.

    Args:
        principal: Requested principal
        duration_days: Requested duration in days
        score: Borrower reputation score

    Returns:
        LoanQuote with collateral, interest and repayment

    Raises:
        LoanQuoteError: If the score is below the borrowing minimum
            or the amount/duration is outside configured bounds
    """
    config = config or LoanTermsConfig()
    amount = _to_decimal(principal, "principal")
    score = clamp_score(score)

    if not is_eligible_to_borrow(score, config):
        raise LoanQuoteError(
            f"Reputation score {score} is below the minimum of {config.min_borrow_score}",
            "score",
        )

    if not config.min_loan_amount <= amount <= config.max_loan_amount:
        raise LoanQuoteError(
            f"Principal must be between {config.min_loan_amount} and {config.max_loan_amount}",
            "principal",
        )

    if not config.min_duration_days <= duration_days <= config.max_duration_days:
        raise LoanQuoteError(
            f"Duration must be between {config.min_duration_days} and {config.max_duration_days} days",
            "duration_days",
        )

    apr = interest_rate_apr_percent(score, config)
    ratio = collateral_ratio_percent(score, config)
    total = calculate_repayment(amount, apr, duration_days)

    quote = LoanQuote(
        principal=amount.quantize(CENTS, rounding=ROUND_HALF_UP),
        duration_days=duration_days,
        score=score,
        interest_rate_apr_percent=apr,
        collateral_ratio_percent=ratio,
        required_collateral=required_collateral(amount, score, config),
        interest=total - amount.quantize(CENTS, rounding=ROUND_HALF_UP),
        total_repayment=total,
    )

    logger.debug(f"Quoted loan: principal={quote.principal} days={duration_days} score={score}")

    return quote
