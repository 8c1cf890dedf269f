"""SQLAlchemy ORM models for the ledger key-value store"""

from sqlalchemy import Column, DateTime, JSON, Text
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql import func

Base = declarative_base()

# item_key for scalar entries (counter, admin, ...)
SCALAR_ITEM = ""


class LedgerEntry(Base):
    """One addressable value of the ledger store"""

    __tablename__ = "ledger_entry"

    data_key = Column(Text, primary_key=True)
    item_key = Column(Text, primary_key=True, default=SCALAR_ITEM)
    value = Column(JSON, nullable=False)
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )
