"""Liquidity pool endpoints - deposits and pool totals"""

import logging
from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException, Request
from sqlalchemy.orm import Session

from gig_lending.api.v1.schemas import (
    LiquidityDepositSchema,
    LiquidityDepositsResponse,
    LiquidityRequest,
    TotalLiquidityResponse,
)
from gig_lending.api.dependencies import get_caller, get_ledger_client, get_protocol, get_request_id
from gig_lending.api.errors import protocol_http_error
from gig_lending.infrastructure.database.session import get_db
from gig_lending.infrastructure.clients.ledger import LedgerClient
from gig_lending.domain.protocol import LendingProtocol
from gig_lending.domain.exceptions import ProtocolError
from gig_lending.infrastructure.observability.metrics import record_liquidity
from gig_lending.infrastructure.observability.logging import log_liquidity_provided, log_rejection

router = APIRouter()


@router.post("/liquidity", response_model=TotalLiquidityResponse, status_code=201)
def provide_liquidity(
    request_body: LiquidityRequest,
    background_tasks: BackgroundTasks,
    request: Request,
    caller: str = Depends(get_caller),
    db: Session = Depends(get_db),
    protocol: LendingProtocol = Depends(get_protocol),
    ledger_client: LedgerClient = Depends(get_ledger_client),
):
    """Deposit into the shared pool at the fixed provider APY"""
    request_id = get_request_id(request)

    try:
        deposit = protocol.provide_liquidity(caller, request_body.provider, request_body.amount)
        total_liquidity = protocol.get_total_liquidity()
        db.commit()

    except ProtocolError as e:
        db.rollback()
        log_rejection(request_id, "provide_liquidity", e)
        raise protocol_http_error(e)

    except Exception as e:
        db.rollback()
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    background_tasks.add_task(
        ledger_client.publish,
        "LIQUIDITY_PROVIDED",
        {
            "provider": deposit.provider,
            "amount": deposit.amount,
            "apy": deposit.apy,
            "provided_at": deposit.provided_at,
        },
    )

    record_liquidity(total_liquidity, deposited=True)
    log_liquidity_provided(request_id, deposit.provider, deposit.amount, total_liquidity)

    return TotalLiquidityResponse(total_liquidity=total_liquidity)


@router.get("/liquidity", response_model=TotalLiquidityResponse)
def get_total_liquidity(protocol: LendingProtocol = Depends(get_protocol)):
    """Liquidity currently available to fund loans"""
    return TotalLiquidityResponse(total_liquidity=protocol.get_total_liquidity())


@router.get("/liquidity/{provider}", response_model=LiquidityDepositsResponse)
def get_liquidity_deposits(provider: str, protocol: LendingProtocol = Depends(get_protocol)):
    """A provider's deposits, oldest first; empty when the provider never deposited"""
    deposits = protocol.get_liquidity_deposits(provider)
    return LiquidityDepositsResponse(
        provider=provider,
        deposits=[LiquidityDepositSchema.from_domain(d) for d in deposits],
    )
