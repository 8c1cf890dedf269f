"""Lending protocol - public operations over the ledger store"""

from typing import Any, Iterable, List, Optional

from gig_lending.domain.constants import DEFAULT_INTEREST_RATES
from gig_lending.domain.exceptions import AlreadyInitializedError
from gig_lending.domain.guards import require_admin, require_auth, require_not_paused
from gig_lending.domain.liquidity import record_deposit
from gig_lending.domain.models import CreditProfile, DataKey, LedgerState, LiquidityDeposit, Loan
from gig_lending.domain.origination import originate_loan
from gig_lending.domain.ports import Clock, LedgerStorage
from gig_lending.domain.profiles import build_credit_profile
from gig_lending.utils.time_utils import unix_now


def _get_or(
    storage: LedgerStorage,
    key: DataKey,
    default: Any,
    item: Optional[str] = None,
    for_update: bool = False,
) -> Any:
    value = storage.get(key, item=item, for_update=for_update)
    return default if value is None else value


def load_state(storage: LedgerStorage, for_update: bool = False) -> LedgerState:
    """
    Read the global aggregates, applying the defaults of an uninitialized ledger:
    counter 0, liquidity 0, not paused, empty rate table.

    Mutating calls pass for_update=True. Keys are always read in the same
    order, so concurrent callers queue on the admin entry instead of
    deadlocking.
    """
    return LedgerState(
        admin=storage.get(DataKey.ADMIN, for_update=for_update),
        loan_counter=_get_or(storage, DataKey.LOAN_COUNTER, 0, for_update=for_update),
        total_liquidity=_get_or(storage, DataKey.TOTAL_LIQUIDITY, 0, for_update=for_update),
        paused=_get_or(storage, DataKey.PAUSED, False, for_update=for_update),
        interest_rates=dict(_get_or(storage, DataKey.INTEREST_RATES, {}, for_update=for_update)),
    )


class LendingProtocol:
    """
    Entry point for every protocol call.

    Each operation loads the ledger state it needs, runs the pure domain
    logic, and writes results back only after all checks have passed. A
    raised ProtocolError therefore always means nothing was written.
    """

    def __init__(self, storage: LedgerStorage, clock: Clock = unix_now, unit_scale: int = 1):
        self.storage = storage
        self.clock = clock
        self.unit_scale = unit_scale

    def initialize(self, admin: str) -> None:
        """One-time setup: admin, zeroed aggregates, default rate table"""
        if self.storage.get(DataKey.ADMIN, for_update=True) is not None:
            raise AlreadyInitializedError()

        self.storage.set(DataKey.ADMIN, admin)
        self.storage.set(DataKey.LOAN_COUNTER, 0)
        self.storage.set(DataKey.TOTAL_LIQUIDITY, 0)
        self.storage.set(DataKey.PAUSED, False)
        self.storage.set(DataKey.INTEREST_RATES, dict(DEFAULT_INTEREST_RATES))

    def update_credit_profile(
        self,
        caller: str,
        user: str,
        total_income: int,
        avg_monthly_income: int,
        platforms: Iterable[str],
    ) -> CreditProfile:
        """Create or fully replace the caller's credit profile"""
        require_auth(caller, user)

        profile = build_credit_profile(
            user,
            total_income,
            avg_monthly_income,
            platforms,
            now=self.clock(),
            unit_scale=self.unit_scale,
        )
        self.storage.set(DataKey.CREDIT_PROFILES, profile, item=user)
        return profile

    def request_loan(
        self,
        caller: str,
        borrower: str,
        amount: int,
        collateral: int,
        duration: int,
    ) -> int:
        """Originate a loan from the pool; returns the new loan id"""
        state = load_state(self.storage, for_update=True)
        profile = self.storage.get(DataKey.CREDIT_PROFILES, item=borrower)

        result = originate_loan(
            state,
            profile,
            caller=caller,
            borrower=borrower,
            amount=amount,
            collateral=collateral,
            duration=duration,
            now=self.clock(),
        )

        self.storage.set(DataKey.LOANS, result.loan, item=str(result.loan_id))
        self.storage.set(DataKey.LOAN_COUNTER, result.state.loan_counter)
        self.storage.set(DataKey.TOTAL_LIQUIDITY, result.state.total_liquidity)
        return result.loan_id

    def provide_liquidity(self, caller: str, provider: str, amount: int) -> LiquidityDeposit:
        """Add a deposit to the pool; returns the new deposit record"""
        require_auth(caller, provider)
        state = load_state(self.storage, for_update=True)
        require_not_paused(state)

        existing = _get_or(self.storage, DataKey.LIQUIDITY_POOLS, (), item=provider, for_update=True)
        new_state, deposits = record_deposit(state, existing, provider, amount, now=self.clock())

        self.storage.set(DataKey.LIQUIDITY_POOLS, deposits, item=provider)
        self.storage.set(DataKey.TOTAL_LIQUIDITY, new_state.total_liquidity)
        return deposits[-1]

    def set_paused(self, caller: str, paused: bool) -> None:
        """Administrative pause switch"""
        state = load_state(self.storage, for_update=True)
        require_admin(state, caller)
        self.storage.set(DataKey.PAUSED, paused)

    def get_loan(self, loan_id: int) -> Optional[Loan]:
        return self.storage.get(DataKey.LOANS, item=str(loan_id))

    def get_credit_profile(self, user: str) -> Optional[CreditProfile]:
        return self.storage.get(DataKey.CREDIT_PROFILES, item=user)

    def get_total_liquidity(self) -> int:
        return _get_or(self.storage, DataKey.TOTAL_LIQUIDITY, 0)

    def get_liquidity_deposits(self, provider: str) -> List[LiquidityDeposit]:
        """Provider's deposits in the order they were made"""
        return list(_get_or(self.storage, DataKey.LIQUIDITY_POOLS, (), item=provider))

    def get_ledger_state(self) -> LedgerState:
        return load_state(self.storage)
