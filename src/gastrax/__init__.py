"""Fee analytics for EIP-1559 style fee-history data."""

from .engine import analyze, parse, MalformedInputError, Summary
from .types import Congestion, Trend

__all__ = ["analyze", "parse", "MalformedInputError", "Summary", "Congestion", "Trend"]
