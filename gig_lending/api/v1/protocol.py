"""Protocol administration - initialization, state, pause switch"""

import logging
from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy.orm import Session

from gig_lending.api.v1.schemas import InitializeRequest, PauseRequest, ProtocolStateResponse
from gig_lending.api.dependencies import get_caller, get_protocol, get_request_id
from gig_lending.api.errors import protocol_http_error
from gig_lending.infrastructure.database.session import get_db
from gig_lending.domain.protocol import LendingProtocol
from gig_lending.domain.exceptions import ProtocolError
from gig_lending.infrastructure.observability.logging import log_rejection

router = APIRouter()


@router.post("/protocol/initialize", response_model=ProtocolStateResponse, status_code=201)
def initialize(
    request_body: InitializeRequest,
    request: Request,
    db: Session = Depends(get_db),
    protocol: LendingProtocol = Depends(get_protocol),
):
    """One-time setup: admin, zeroed aggregates, default interest-rate tiers"""
    request_id = get_request_id(request)

    try:
        protocol.initialize(request_body.admin)
        db.commit()

    except ProtocolError as e:
        db.rollback()
        log_rejection(request_id, "initialize", e)
        raise protocol_http_error(e)

    except Exception as e:
        db.rollback()
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    logging.info("Protocol initialized", extra={"request_id": request_id, "admin": request_body.admin})
    return ProtocolStateResponse.from_domain(protocol.get_ledger_state())


@router.get("/protocol", response_model=ProtocolStateResponse)
def get_protocol_state(protocol: LendingProtocol = Depends(get_protocol)):
    """Global ledger aggregates"""
    return ProtocolStateResponse.from_domain(protocol.get_ledger_state())


@router.post("/protocol/pause", response_model=ProtocolStateResponse)
def set_paused(
    request_body: PauseRequest,
    request: Request,
    caller: str = Depends(get_caller),
    db: Session = Depends(get_db),
    protocol: LendingProtocol = Depends(get_protocol),
):
    """Admin-only: pause or resume loan origination and deposits"""
    request_id = get_request_id(request)

    try:
        protocol.set_paused(caller, request_body.paused)
        db.commit()

    except ProtocolError as e:
        db.rollback()
        log_rejection(request_id, "set_paused", e)
        raise protocol_http_error(e)

    except Exception as e:
        db.rollback()
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    logging.warning(
        "Protocol paused" if request_body.paused else "Protocol resumed",
        extra={"request_id": request_id, "admin": caller},
    )
    return ProtocolStateResponse.from_domain(protocol.get_ledger_state())
