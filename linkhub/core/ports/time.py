from __future__ import annotations

from datetime import datetime
from typing import Protocol


class TimePort(Protocol):
    """Time source used for export naming and notification expiry."""

    def now_utc(self) -> datetime:
        """Get current UTC time."""
        ...
