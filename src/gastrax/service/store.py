"""Holder for the most recent fee summary."""

from __future__ import annotations

import time
from typing import Optional

from ..engine import Summary


class SummaryStore:
    """Latest summary plus the outcome of the last refresh.

    A failed refresh clears the summary so consumers show a placeholder
    instead of stale numbers.
    """

    def __init__(self) -> None:
        self.summary: Optional[Summary] = None
        self.updated_at: Optional[float] = None
        self.error: Optional[str] = None

    def update(self, summary: Summary, now: Optional[float] = None) -> None:
        self.summary = summary
        self.updated_at = time.time() if now is None else now
        self.error = None

    def set_error(self, message: str) -> None:
        self.summary = None
        self.error = message

    def age(self, now: Optional[float] = None) -> Optional[float]:
        """Seconds since the last successful update, ``None`` if never."""
        if self.updated_at is None:
            return None
        return (time.time() if now is None else now) - self.updated_at
