"""Dependency injection for FastAPI endpoints"""

from fastapi import Depends, Header, HTTPException, Request
from sqlalchemy.orm import Session
from gig_lending.config import settings
from gig_lending.domain.ports import Clock
from gig_lending.domain.protocol import LendingProtocol
from gig_lending.infrastructure.clients.ledger import LedgerClient
from gig_lending.infrastructure.database.repositories import LedgerEntryRepository
from gig_lending.infrastructure.database.session import get_db
from gig_lending.utils.time_utils import unix_now


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_caller(x_caller_address: str | None = Header(default=None)) -> str:
    """Caller address, authenticated by the gateway in front of this service"""
    if not x_caller_address:
        raise HTTPException(status_code=401, detail="Missing X-Caller-Address header")
    return x_caller_address


def get_clock() -> Clock:
    """Ledger time source"""
    return unix_now


def get_protocol(db: Session = Depends(get_db), clock: Clock = Depends(get_clock)) -> LendingProtocol:
    """Protocol bound to the request's database session"""
    return LendingProtocol(LedgerEntryRepository(db), clock=clock, unit_scale=settings.amount_unit_scale)


def get_ledger_client() -> LedgerClient:
    """Provide Ledger webhook client instance"""
    return LedgerClient()
