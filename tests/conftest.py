"""Pytest fixtures for testing"""

import os

# Must be set before gig_lending.config is imported
os.environ.setdefault("GIG_LENDING_DATABASE_URL", "sqlite:///./test.db")

import pytest
from typing import Generator
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker, Session
from gig_lending.api.main import create_app
from gig_lending.api.dependencies import get_clock
from gig_lending.domain.protocol import LendingProtocol
from gig_lending.infrastructure.database.models import Base
from gig_lending.infrastructure.database.session import create_ledger_engine, get_db
from gig_lending.infrastructure.storage.memory import InMemoryLedgerStorage


# Ledger time used by every fixture
NOW = 1_000

ADMIN = "GADMIN"
PROVIDER = "GPROVIDER"
BORROWER = "GBORROWER"

# Test database
TEST_DATABASE_URL = "sqlite:///./test.db"
engine = create_ledger_engine(TEST_DATABASE_URL)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db() -> Generator[Session, None, None]:
    """Create test database and session"""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db: Session) -> TestClient:
    """Create FastAPI test client with test database and a frozen ledger clock"""
    app = create_app()

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_clock] = lambda: (lambda: NOW)
    return TestClient(app)


@pytest.fixture
def storage() -> InMemoryLedgerStorage:
    return InMemoryLedgerStorage()


@pytest.fixture
def protocol(storage: InMemoryLedgerStorage) -> LendingProtocol:
    """Initialized protocol over an in-memory ledger"""
    protocol = LendingProtocol(storage, clock=lambda: NOW)
    protocol.initialize(ADMIN)
    return protocol


@pytest.fixture
def funded_protocol(protocol: LendingProtocol) -> LendingProtocol:
    """Pool holding 10_000 and a borrower profile scoring 425 (2000 bps tier)"""
    protocol.provide_liquidity(PROVIDER, PROVIDER, 10_000)
    protocol.update_credit_profile(BORROWER, BORROWER, 25_000, 2_000, ["uber"])
    return protocol


@pytest.fixture
def session_factory(db: Session) -> sessionmaker:
    """Factory for extra sessions on the test database, one per concurrent caller"""
    return TestingSessionLocal
