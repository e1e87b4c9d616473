"""Fee-history parsing and analytics."""

from .parser import MalformedInputError, parse, wei_to_gwei
from .analytics import (
    analyze,
    classify_congestion,
    classify_trend,
    fullness,
    median,
    percent_change,
)
from ._types import (
    DEFAULT_THRESHOLDS,
    PERCENTILES,
    FeeRow,
    FeeRows,
    NormalizedSamples,
    Summary,
    Thresholds,
    TipBands,
)
from ..types import Congestion, Trend

__all__ = [
    "MalformedInputError",
    "parse",
    "wei_to_gwei",
    "analyze",
    "classify_congestion",
    "classify_trend",
    "fullness",
    "median",
    "percent_change",
    "DEFAULT_THRESHOLDS",
    "PERCENTILES",
    "FeeRow",
    "FeeRows",
    "NormalizedSamples",
    "Summary",
    "Thresholds",
    "TipBands",
    "Congestion",
    "Trend",
]
