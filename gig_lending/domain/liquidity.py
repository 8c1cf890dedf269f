"""Liquidity ledger - lender deposits and the pool's running total"""

from dataclasses import replace
from typing import Sequence, Tuple

from gig_lending.domain.arithmetic import checked_add, checked_sub
from gig_lending.domain.constants import PROVIDER_APY_BPS
from gig_lending.domain.models import LedgerState, LiquidityDeposit


def record_deposit(
    state: LedgerState,
    deposits: Sequence[LiquidityDeposit],
    provider: str,
    amount: int,
    now: int,
) -> Tuple[LedgerState, Tuple[LiquidityDeposit, ...]]:
    """
    Append a deposit for provider and credit the pool total.

    Returns the new state and the provider's full deposit list. Inputs are
    not modified. The amount is not bounds-checked.
    """
    deposit = LiquidityDeposit(
        provider=provider,
        amount=amount,
        apy=PROVIDER_APY_BPS,
        provided_at=now,
        earned_interest=0,
        is_active=True,
    )
    new_state = replace(state, total_liquidity=checked_add(state.total_liquidity, amount))
    return new_state, tuple(deposits) + (deposit,)


def debit_liquidity(state: LedgerState, amount: int) -> LedgerState:
    """Remove a funded loan's principal from the pool; caller checks availability"""
    return replace(state, total_liquidity=checked_sub(state.total_liquidity, amount))


def has_liquidity(state: LedgerState, amount: int) -> bool:
    return state.total_liquidity >= amount
