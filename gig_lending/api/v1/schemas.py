"""Pydantic schemas for API request/response validation"""

from pydantic import BaseModel, Field
from typing import Dict, List, Optional
from gig_lending.domain.models import CreditProfile, LedgerState, LiquidityDeposit, Loan


class InitializeRequest(BaseModel):
    """Request body for POST /v1/protocol/initialize"""

    admin: str = Field(..., min_length=1, description="Administrator address")


class PauseRequest(BaseModel):
    """Request body for POST /v1/protocol/pause"""

    paused: bool


class ProtocolStateResponse(BaseModel):
    """Response for GET /v1/protocol"""

    admin: Optional[str] = None
    loan_counter: int
    total_liquidity: int
    paused: bool
    interest_rates: Dict[int, int]

    @classmethod
    def from_domain(cls, state: LedgerState) -> "ProtocolStateResponse":
        return cls(
            admin=state.admin,
            loan_counter=state.loan_counter,
            total_liquidity=state.total_liquidity,
            paused=state.paused,
            interest_rates=state.interest_rates,
        )


class CreditProfileRequest(BaseModel):
    """Request body for PUT /v1/profiles/{user}"""

    total_income: int = Field(..., ge=0, description="Total reported income in ledger units")
    avg_monthly_income: int = Field(..., ge=0, description="Average monthly income in ledger units")
    gig_platforms: List[str] = Field(default_factory=list, description="Platforms the user works on")


class CreditProfileResponse(BaseModel):
    """Stored credit profile"""

    user: str
    total_income: int
    avg_monthly_income: int
    payment_history: int
    gig_platforms: List[str]
    verification_level: int
    credit_score: int
    last_updated: int

    @classmethod
    def from_domain(cls, profile: CreditProfile) -> "CreditProfileResponse":
        return cls(
            user=profile.user,
            total_income=profile.total_income,
            avg_monthly_income=profile.avg_monthly_income,
            payment_history=profile.payment_history,
            gig_platforms=list(profile.gig_platforms),
            verification_level=profile.verification_level,
            credit_score=profile.credit_score,
            last_updated=profile.last_updated,
        )


class LoanRequest(BaseModel):
    """Request body for POST /v1/loans"""

    borrower: str = Field(..., min_length=1)
    amount: int = Field(..., gt=0, description="Principal in ledger units")
    collateral: int = Field(..., gt=0, description="Collateral in ledger units, >= 150% of amount")
    duration: int = Field(..., ge=0, description="Loan duration in seconds")


class LoanResponse(BaseModel):
    """Loan record with its id"""

    loan_id: int
    borrower: str
    amount: int
    collateral: int
    interest_rate: int
    duration: int
    created_at: int
    due_date: int
    due_date_iso: str
    is_active: bool
    credit_score: int

    @classmethod
    def from_domain(cls, loan_id: int, loan: Loan, due_date_iso: str) -> "LoanResponse":
        return cls(
            loan_id=loan_id,
            borrower=loan.borrower,
            amount=loan.amount,
            collateral=loan.collateral,
            interest_rate=loan.interest_rate,
            duration=loan.duration,
            created_at=loan.created_at,
            due_date=loan.due_date,
            due_date_iso=due_date_iso,
            is_active=loan.is_active,
            credit_score=loan.credit_score,
        )


class LiquidityRequest(BaseModel):
    """Request body for POST /v1/liquidity"""

    provider: str = Field(..., min_length=1)
    amount: int = Field(..., gt=0, description="Deposit in ledger units")


class LiquidityDepositSchema(BaseModel):
    """Single deposit record"""

    amount: int
    apy: int
    provided_at: int
    earned_interest: int
    is_active: bool

    @classmethod
    def from_domain(cls, deposit: LiquidityDeposit) -> "LiquidityDepositSchema":
        return cls(
            amount=deposit.amount,
            apy=deposit.apy,
            provided_at=deposit.provided_at,
            earned_interest=deposit.earned_interest,
            is_active=deposit.is_active,
        )


class LiquidityDepositsResponse(BaseModel):
    """Response for GET /v1/liquidity/{provider}"""

    provider: str
    deposits: List[LiquidityDepositSchema]


class TotalLiquidityResponse(BaseModel):
    """Response for GET /v1/liquidity and POST /v1/liquidity"""

    total_liquidity: int
