"""Ledger timestamp utilities"""

import time
from datetime import datetime, timezone


def unix_now() -> int:
    """Current time in whole unix seconds"""
    return int(time.time())


def to_iso(timestamp: int) -> str:
    """Render a unix timestamp as an ISO-8601 UTC string"""
    return datetime.fromtimestamp(timestamp, tz=timezone.utc).isoformat()
