"""Data access layer for the ledger key-value store"""

from typing import Any, Optional
from sqlalchemy.orm import Session
from gig_lending.domain.models import DataKey
from gig_lending.infrastructure.database.codec import decode_value, encode_value
from gig_lending.infrastructure.database.models import LedgerEntry, SCALAR_ITEM


class LedgerEntryRepository:
    """
    LedgerStorage backed by the ledger_entry table.

    Writes are flushed, not committed: the caller owns the transaction and
    commits once per protocol call (or rolls back on failure).
    """

    def __init__(self, db: Session):
        self.db = db

    def get(self, key: DataKey, item: Optional[str] = None, for_update: bool = False) -> Optional[Any]:
        """Fetch and decode one entry; for_update takes a row lock held until commit"""
        entry = self.db.get(
            LedgerEntry,
            (key.value, item or SCALAR_ITEM),
            with_for_update=True if for_update else None,
        )
        if entry is None:
            return None
        return decode_value(key, entry.value)

    def set(self, key: DataKey, value: Any, item: Optional[str] = None) -> None:
        """Insert or overwrite one entry"""
        entry = self.db.get(LedgerEntry, (key.value, item or SCALAR_ITEM))
        encoded = encode_value(key, value)
        if entry is None:
            self.db.add(LedgerEntry(data_key=key.value, item_key=item or SCALAR_ITEM, value=encoded))
        else:
            entry.value = encoded
        self.db.flush()
