"""POST /v1/loans, GET /v1/loans/{loan_id} - Loan origination and lookup"""

import time
import logging
from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException, Request
from sqlalchemy.orm import Session

from gig_lending.api.v1.schemas import LoanRequest, LoanResponse
from gig_lending.api.dependencies import get_caller, get_ledger_client, get_protocol, get_request_id
from gig_lending.api.errors import protocol_http_error
from gig_lending.infrastructure.database.session import get_db
from gig_lending.infrastructure.clients.ledger import LedgerClient
from gig_lending.domain.protocol import LendingProtocol
from gig_lending.domain.exceptions import ProtocolError
from gig_lending.infrastructure.observability.metrics import record_liquidity, record_loan_request
from gig_lending.infrastructure.observability.logging import log_loan_originated, log_rejection
from gig_lending.utils.time_utils import to_iso

router = APIRouter()


@router.post("/loans", response_model=LoanResponse, status_code=201)
def request_loan(
    request_body: LoanRequest,
    background_tasks: BackgroundTasks,
    request: Request,
    caller: str = Depends(get_caller),
    db: Session = Depends(get_db),
    protocol: LendingProtocol = Depends(get_protocol),
    ledger_client: LedgerClient = Depends(get_ledger_client),
):
    """
    Originate a loan funded by the liquidity pool.

    Flow:
    1. Validate caller, pause switch, liquidity, profile, collateral
    2. Price the loan from the borrower's credit score tier
    3. Persist loan, debit pool, advance loan counter (one transaction)
    4. Send async LOAN_ORIGINATED event to the ledger
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        loan_id = protocol.request_loan(
            caller=caller,
            borrower=request_body.borrower,
            amount=request_body.amount,
            collateral=request_body.collateral,
            duration=request_body.duration,
        )
        loan = protocol.get_loan(loan_id)
        total_liquidity = protocol.get_total_liquidity()
        db.commit()

    except ProtocolError as e:
        db.rollback()
        record_loan_request(type(e).__name__)
        log_rejection(request_id, "request_loan", e)
        raise protocol_http_error(e)

    except Exception as e:
        db.rollback()
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    background_tasks.add_task(
        ledger_client.publish,
        "LOAN_ORIGINATED",
        {
            "loan_id": loan_id,
            "borrower": loan.borrower,
            "amount": loan.amount,
            "collateral": loan.collateral,
            "interest_rate": loan.interest_rate,
            "due_date": loan.due_date,
        },
    )

    duration_ms = (time.time() - start_time) * 1000
    record_loan_request("originated", loan.amount)
    record_liquidity(total_liquidity)
    log_loan_originated(
        request_id,
        loan.borrower,
        loan_id,
        loan.amount,
        loan.interest_rate,
        loan.credit_score,
        duration_ms,
    )

    return LoanResponse.from_domain(loan_id, loan, to_iso(loan.due_date))


@router.get("/loans/{loan_id}", response_model=LoanResponse)
def get_loan(loan_id: int, protocol: LendingProtocol = Depends(get_protocol)):
    """Retrieve a loan by id"""
    if loan_id < 0:
        raise HTTPException(status_code=400, detail="Invalid loan ID")

    loan = protocol.get_loan(loan_id)
    if loan is None:
        raise HTTPException(status_code=404, detail="Loan not found")

    return LoanResponse.from_domain(loan_id, loan, to_iso(loan.due_date))
