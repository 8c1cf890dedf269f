"""In-process ledger store for library use and tests"""

from typing import Any, Dict, Optional, Tuple

from gig_lending.domain.models import DataKey


class InMemoryLedgerStorage:
    """Dict-backed LedgerStorage; domain values are immutable so no copying is needed"""

    def __init__(self):
        self._entries: Dict[Tuple[DataKey, Optional[str]], Any] = {}

    def get(self, key: DataKey, item: Optional[str] = None, for_update: bool = False) -> Optional[Any]:
        return self._entries.get((key, item))

    def set(self, key: DataKey, value: Any, item: Optional[str] = None) -> None:
        self._entries[(key, item)] = value

    def snapshot(self) -> Dict[Tuple[DataKey, Optional[str]], Any]:
        """Shallow copy of every entry, for comparing state before and after a call"""
        return dict(self._entries)
