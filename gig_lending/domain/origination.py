"""Loan origination workflow - validates a loan request against ledger state"""

from dataclasses import dataclass, replace
from typing import Optional

from gig_lending.domain.arithmetic import checked_add_u64, checked_mul, truncating_div
from gig_lending.domain.constants import MIN_COLLATERAL_RATIO_PCT
from gig_lending.domain.exceptions import (
    InsufficientCollateralError,
    InsufficientLiquidityError,
    ProfileNotFoundError,
)
from gig_lending.domain.guards import require_auth, require_not_paused
from gig_lending.domain.liquidity import debit_liquidity, has_liquidity
from gig_lending.domain.models import CreditProfile, LedgerState, Loan
from gig_lending.domain.rates import resolve_interest_rate


@dataclass(frozen=True)
class Origination:
    """Result of an accepted loan request: what the caller must persist"""

    loan_id: int
    loan: Loan
    state: LedgerState


def required_collateral(amount: int) -> int:
    """Minimum collateral for a principal: 150%, truncated toward zero"""
    return truncating_div(checked_mul(amount, MIN_COLLATERAL_RATIO_PCT), 100)


def originate_loan(
    state: LedgerState,
    profile: Optional[CreditProfile],
    caller: str,
    borrower: str,
    amount: int,
    collateral: int,
    duration: int,
    now: int,
) -> Origination:
    """
    Validate a loan request and compute the resulting ledger state.

    Checks, in order (first failure aborts):
    1. caller is the borrower
    2. protocol not paused
    3. pool liquidity covers the amount
    4. borrower has a credit profile
    5. collateral >= 150% of amount

    Pure: inputs are not modified and nothing is written. The returned
    state has the principal debited and the loan counter advanced.
    """
    require_auth(caller, borrower)
    require_not_paused(state)

    if not has_liquidity(state, amount):
        raise InsufficientLiquidityError(amount, state.total_liquidity)

    if profile is None:
        raise ProfileNotFoundError(borrower)

    required = required_collateral(amount)
    if collateral < required:
        raise InsufficientCollateralError(collateral, required)

    loan_id = state.loan_counter
    loan = Loan(
        borrower=borrower,
        amount=amount,
        collateral=collateral,
        interest_rate=resolve_interest_rate(profile.credit_score, state.interest_rates),
        duration=duration,
        created_at=now,
        due_date=checked_add_u64(now, duration),
        is_active=True,
        credit_score=profile.credit_score,
    )

    new_state = debit_liquidity(state, amount)
    new_state = replace(new_state, loan_counter=checked_add_u64(loan_id, 1))

    return Origination(loan_id=loan_id, loan=loan, state=new_state)
