"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class ProtocolError(DomainException):
    """A protocol call aborted; no state was written"""

    pass


class AuthorizationError(ProtocolError):
    """Caller is not the identity the call acts on behalf of"""

    def __init__(self, caller: str, identity: str):
        self.caller = caller
        self.identity = identity
        super().__init__(f"Caller {caller} is not authorized to act for {identity}")


class ProtocolPausedError(ProtocolError):
    """Protocol is paused by the administrator"""

    def __init__(self):
        super().__init__("Protocol is paused")


class InsufficientLiquidityError(ProtocolError):
    """Liquidity pool cannot fund the requested amount"""

    def __init__(self, requested: int, available: int):
        self.requested = requested
        self.available = available
        super().__init__(f"Insufficient liquidity: requested {requested}, available {available}")


class ProfileNotFoundError(ProtocolError):
    """Borrower has no stored credit profile"""

    def __init__(self, user: str):
        self.user = user
        super().__init__(f"Credit profile not found for {user}")


class InsufficientCollateralError(ProtocolError):
    """Collateral is below 150% of principal"""

    def __init__(self, collateral: int, required: int):
        self.collateral = collateral
        self.required = required
        super().__init__(f"Insufficient collateral: provided {collateral}, required {required}")


class AlreadyInitializedError(ProtocolError):
    """initialize() was already called for this ledger"""

    def __init__(self):
        super().__init__("Protocol is already initialized")


class ProtocolNotInitializedError(ProtocolError):
    """Administrative call made before an admin was stored"""

    def __init__(self):
        super().__init__("Protocol is not initialized")


class ArithmeticOverflowError(ProtocolError):
    """Integer result outside the ledger's fixed-width range"""

    pass


class LedgerWebhookError(DomainException):
    """Ledger webhook could not be delivered"""

    pass
