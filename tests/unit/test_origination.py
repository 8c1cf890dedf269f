"""Unit tests for the loan origination workflow"""

import pytest
from gig_lending.domain.constants import DEFAULT_INTEREST_RATES
from gig_lending.domain.exceptions import (
    AuthorizationError,
    InsufficientCollateralError,
    InsufficientLiquidityError,
    ProfileNotFoundError,
    ProtocolPausedError,
)
from gig_lending.domain.models import CreditProfile, LedgerState
from gig_lending.domain.origination import originate_loan, required_collateral


BORROWER = "GBORROWER"


def make_profile(credit_score: int = 550) -> CreditProfile:
    return CreditProfile(
        user=BORROWER,
        total_income=50_000,
        avg_monthly_income=4_000,
        payment_history=500,
        gig_platforms=("uber", "doordash"),
        verification_level=3,
        credit_score=credit_score,
        last_updated=1_000,
    )


def make_state(**overrides) -> LedgerState:
    fields = {"total_liquidity": 10_000, "interest_rates": dict(DEFAULT_INTEREST_RATES)}
    fields.update(overrides)
    return LedgerState(**fields)


def originate(state=None, profile=None, caller=BORROWER, amount=1_000, collateral=1_500, duration=86_400):
    return originate_loan(
        state or make_state(),
        profile,
        caller=caller,
        borrower=BORROWER,
        amount=amount,
        collateral=collateral,
        duration=duration,
        now=1_000,
    )


def test_originate_success():
    """Test loan fields, debit, and counter advance"""
    state = make_state(loan_counter=7)
    result = originate(state, make_profile(550))

    assert result.loan_id == 7
    assert result.state.loan_counter == 8
    assert result.state.total_liquidity == 9_000
    assert result.loan.interest_rate == 1500
    assert result.loan.credit_score == 550
    assert result.loan.created_at == 1_000
    assert result.loan.due_date == 1_000 + 86_400
    assert result.loan.is_active is True
    # Input state is not modified
    assert state.loan_counter == 7
    assert state.total_liquidity == 10_000


def test_required_collateral_truncates():
    assert required_collateral(1_000) == 1_500
    assert required_collateral(999) == 1_498  # 1498.5 truncated
    assert required_collateral(-999) == -1_498


def test_collateral_boundary():
    """Test exactly 150% succeeds, 149% fails"""
    assert originate(profile=make_profile(), collateral=1_500).loan.collateral == 1_500

    with pytest.raises(InsufficientCollateralError) as exc_info:
        originate(profile=make_profile(), collateral=1_490)
    assert exc_info.value.required == 1_500


def test_liquidity_boundary():
    """Test the whole pool can be lent, not a unit more"""
    result = originate(make_state(total_liquidity=1_000), make_profile())
    assert result.state.total_liquidity == 0

    with pytest.raises(InsufficientLiquidityError):
        originate(make_state(total_liquidity=999), make_profile())


def test_missing_profile():
    with pytest.raises(ProfileNotFoundError):
        originate(profile=None)


def test_check_order_auth_first():
    """Test wrong caller is reported even when every other check would fail"""
    state = make_state(paused=True, total_liquidity=0)
    with pytest.raises(AuthorizationError):
        originate(state, None, caller="GMALLORY", collateral=0)


def test_check_order_paused_before_liquidity():
    state = make_state(paused=True, total_liquidity=0)
    with pytest.raises(ProtocolPausedError):
        originate(state, None, collateral=0)


def test_check_order_liquidity_before_profile():
    with pytest.raises(InsufficientLiquidityError):
        originate(make_state(total_liquidity=0), None, collateral=0)


def test_check_order_profile_before_collateral():
    with pytest.raises(ProfileNotFoundError):
        originate(profile=None, collateral=0)


def test_rate_snapshot_uses_stored_table():
    """Test loan is priced from the ledger's rate table"""
    state = make_state(interest_rates={500: 1400})
    result = originate(state, make_profile(550))
    assert result.loan.interest_rate == 1400
