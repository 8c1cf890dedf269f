"""Domain models - pure Python dataclasses representing ledger entities"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional, Tuple


class DataKey(str, Enum):
    """Logical keys of the external ledger store"""

    LOANS = "loans"  # loan id -> Loan
    CREDIT_PROFILES = "credit_profiles"  # address -> CreditProfile
    LIQUIDITY_POOLS = "liquidity_pools"  # address -> tuple of LiquidityDeposit
    LOAN_COUNTER = "loan_counter"
    TOTAL_LIQUIDITY = "total_liquidity"
    ADMIN = "admin"
    PAUSED = "paused"
    INTEREST_RATES = "interest_rates"  # score threshold -> bps


@dataclass(frozen=True)
class CreditProfile:
    """Self-reported financials and derived credit score for a gig worker"""

    user: str
    total_income: int
    avg_monthly_income: int
    payment_history: int  # 0-1000
    gig_platforms: Tuple[str, ...]  # insertion order, duplicates kept
    verification_level: int  # 0-5
    credit_score: int  # 300-850
    last_updated: int


@dataclass(frozen=True)
class Loan:
    """Originated loan; never edited after creation"""

    borrower: str
    amount: int
    collateral: int
    interest_rate: int  # bps
    duration: int  # seconds
    created_at: int
    due_date: int
    is_active: bool
    credit_score: int  # borrower score at origination


@dataclass(frozen=True)
class LiquidityDeposit:
    """Single lender contribution to the pool"""

    provider: str
    amount: int
    apy: int  # bps, fixed at deposit time
    provided_at: int
    earned_interest: int = 0
    is_active: bool = True


@dataclass(frozen=True)
class LedgerState:
    """Global aggregates read and written once per protocol call"""

    admin: Optional[str] = None
    loan_counter: int = 0
    total_liquidity: int = 0
    paused: bool = False
    interest_rates: Dict[int, int] = field(default_factory=dict)
