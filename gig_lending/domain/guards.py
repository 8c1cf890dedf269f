"""Preconditions shared by mutating protocol calls"""

from gig_lending.domain.models import LedgerState
from gig_lending.domain.exceptions import (
    AuthorizationError,
    ProtocolNotInitializedError,
    ProtocolPausedError,
)


def require_auth(caller: str, identity: str) -> None:
    """Caller must be the identity it acts for (signature checks happen upstream)"""
    if caller != identity:
        raise AuthorizationError(caller, identity)


def require_not_paused(state: LedgerState) -> None:
    if state.paused:
        raise ProtocolPausedError()


def require_admin(state: LedgerState, caller: str) -> None:
    if state.admin is None:
        raise ProtocolNotInitializedError()
    require_auth(caller, state.admin)
