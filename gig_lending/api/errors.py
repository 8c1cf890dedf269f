"""Translation of protocol failures into HTTP responses"""

import logging
from fastapi import HTTPException, Request
from fastapi.responses import JSONResponse
from gig_lending.domain.exceptions import (
    AlreadyInitializedError,
    ArithmeticOverflowError,
    AuthorizationError,
    InsufficientCollateralError,
    InsufficientLiquidityError,
    ProfileNotFoundError,
    ProtocolError,
    ProtocolNotInitializedError,
    ProtocolPausedError,
)

PROTOCOL_ERROR_STATUS = {
    AuthorizationError: 403,
    ProtocolPausedError: 423,
    InsufficientLiquidityError: 409,
    ProfileNotFoundError: 404,
    InsufficientCollateralError: 422,
    AlreadyInitializedError: 409,
    ProtocolNotInitializedError: 409,
    ArithmeticOverflowError: 422,
}


def protocol_http_error(error: ProtocolError) -> HTTPException:
    return HTTPException(
        status_code=PROTOCOL_ERROR_STATUS.get(type(error), 400),
        detail=str(error),
    )


async def protocol_error_handler(request: Request, exc: ProtocolError) -> JSONResponse:
    """Rejections that escape a router keep their status instead of becoming a 500"""
    logging.warning(
        f"Protocol rejection: {exc}",
        extra={"request_id": getattr(request.state, "request_id", "unknown"), "error": type(exc).__name__},
    )
    return JSONResponse(
        status_code=PROTOCOL_ERROR_STATUS.get(type(exc), 400),
        content={"detail": str(exc)},
    )
