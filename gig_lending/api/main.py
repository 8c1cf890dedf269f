"""FastAPI application factory"""

from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from gig_lending.api.errors import protocol_error_handler
from gig_lending.api.middleware import RequestIDMiddleware, MetricsMiddleware
from gig_lending.api.v1 import liquidity, loans, profiles, protocol
from gig_lending.infrastructure.observability.logging import setup_logging
from gig_lending.config import settings
from gig_lending.domain.exceptions import ProtocolError

# Setup structured logging
setup_logging(settings.log_level)


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Gig Lending Protocol",
        description="Credit scoring, liquidity pool, and loan origination for gig workers",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    app.add_exception_handler(ProtocolError, protocol_error_handler)

    # Health check endpoint
    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register API routers
    app.include_router(protocol.router, prefix="/v1", tags=["protocol"])
    app.include_router(profiles.router, prefix="/v1", tags=["profiles"])
    app.include_router(loans.router, prefix="/v1", tags=["loans"])
    app.include_router(liquidity.router, prefix="/v1", tags=["liquidity"])

    return app


app = create_app()
