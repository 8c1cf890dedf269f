"""PUT/GET /v1/profiles/{user} - Credit profile management"""

import logging
from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy.orm import Session

from gig_lending.api.v1.schemas import CreditProfileRequest, CreditProfileResponse
from gig_lending.api.dependencies import get_caller, get_protocol, get_request_id
from gig_lending.api.errors import protocol_http_error
from gig_lending.infrastructure.database.session import get_db
from gig_lending.domain.protocol import LendingProtocol
from gig_lending.domain.exceptions import ProtocolError
from gig_lending.infrastructure.observability.metrics import credit_score_histogram
from gig_lending.infrastructure.observability.logging import log_profile_updated, log_rejection

router = APIRouter()


@router.put("/profiles/{user}", response_model=CreditProfileResponse)
def update_credit_profile(
    user: str,
    request_body: CreditProfileRequest,
    request: Request,
    caller: str = Depends(get_caller),
    db: Session = Depends(get_db),
    protocol: LendingProtocol = Depends(get_protocol),
):
    """
    Create or replace the caller's credit profile.

    The credit score is recomputed from the submitted figures; payment
    history and verification level are reset on every update.
    """
    request_id = get_request_id(request)

    try:
        profile = protocol.update_credit_profile(
            caller,
            user,
            request_body.total_income,
            request_body.avg_monthly_income,
            request_body.gig_platforms,
        )
        db.commit()

    except ProtocolError as e:
        db.rollback()
        log_rejection(request_id, "update_credit_profile", e)
        raise protocol_http_error(e)

    except Exception as e:
        db.rollback()
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    credit_score_histogram.observe(profile.credit_score)
    log_profile_updated(request_id, user, profile.credit_score, len(profile.gig_platforms))

    return CreditProfileResponse.from_domain(profile)


@router.get("/profiles/{user}", response_model=CreditProfileResponse)
def get_credit_profile(user: str, protocol: LendingProtocol = Depends(get_protocol)):
    """Retrieve a user's stored credit profile"""
    profile = protocol.get_credit_profile(user)
    if profile is None:
        raise HTTPException(status_code=404, detail="Credit profile not found")

    return CreditProfileResponse.from_domain(profile)
