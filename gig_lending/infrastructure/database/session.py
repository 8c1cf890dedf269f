"""Database session management with connection pooling"""

from typing import Any, Dict, Iterator
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, Session
from gig_lending.config import settings


def _engine_options(database_url: str) -> Dict[str, Any]:
    if database_url.startswith("sqlite"):
        return {"connect_args": {"check_same_thread": False}}
    # Connection pool: max 20 connections, recycle after 1 hour to avoid stale connections
    return {
        "pool_pre_ping": True,
        "pool_size": 10,
        "max_overflow": 10,
        "pool_recycle": 3600,
    }


def _serialize_sqlite_transactions(engine: Engine) -> None:
    """
    SQLite ignores SELECT ... FOR UPDATE. Taking the write lock at BEGIN
    gives the same guarantee: a second transaction waits until the first
    commits or rolls back.
    """

    @event.listens_for(engine, "connect")
    def _disable_pysqlite_begin(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None

    @event.listens_for(engine, "begin")
    def _begin_immediate(conn):
        conn.exec_driver_sql("BEGIN IMMEDIATE")


def create_ledger_engine(database_url: str) -> Engine:
    """Engine for the ledger store; row locks on Postgres, write lock on SQLite"""
    engine = create_engine(database_url, **_engine_options(database_url))
    if database_url.startswith("sqlite"):
        _serialize_sqlite_transactions(engine)
    return engine


engine = create_ledger_engine(settings.database_url)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db() -> Iterator[Session]:
    """Dependency injection for database sessions"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
