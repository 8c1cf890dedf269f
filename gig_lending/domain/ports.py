"""Interfaces to the external ledger host"""

from typing import Any, Callable, Optional, Protocol

from gig_lending.domain.models import DataKey

# Current ledger time in unix seconds
Clock = Callable[[], int]


class LedgerStorage(Protocol):
    """
    Key-value store supplied by the ledger host.

    Scalar keys (counter, admin, ...) use item=None; map-like keys (loans,
    profiles, pools) address one entry per item. Reads made with
    for_update=True hold the entry until the surrounding call ends, so
    overlapping mutating calls see each other's writes.
    """

    def get(self, key: DataKey, item: Optional[str] = None, for_update: bool = False) -> Optional[Any]:
        """Stored value, or None when absent"""
        ...

    def set(self, key: DataKey, value: Any, item: Optional[str] = None) -> None:
        """Overwrite the value"""
        ...
