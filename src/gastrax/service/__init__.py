"""Background services feeding the fee summary."""

from .poller import refresh_once, start_fee_poller
from .store import SummaryStore

__all__ = ["refresh_once", "start_fee_poller", "SummaryStore"]
