"""Trend, congestion and fee-tier analysis of normalised fee samples.

The engine is a pure function of its input: no state is kept between calls
and every numeric edge case (empty windows, zero averages) degrades to a
sentinel value instead of raising.  Rounding is applied only when the
:class:`Summary` is assembled so the classification thresholds always see
unrounded values.
"""

from __future__ import annotations

import logging
import math
from typing import Sequence, Tuple

import numpy as np

from ..types import Congestion, Trend
from ._types import (
    DEFAULT_THRESHOLDS,
    FeeRow,
    FeeRows,
    NormalizedSamples,
    Summary,
    Thresholds,
    TipBands,
)

logger = logging.getLogger(__name__)

FEE_PLACES = 6
FULLNESS_PLACES = 4
PERCENT_PLACES = 1


def round_half_up(value: float, places: int) -> float:
    """Round ``value`` to ``places`` decimals with ties going up."""
    factor = 10**places
    return math.floor(value * factor + 0.5) / factor


def median(values: Sequence[float]) -> float:
    """Return the median of ``values`` or ``0.0`` for an empty sequence."""
    if len(values) == 0:
        return 0.0
    return float(np.median(np.asarray(values, dtype=np.float64)))


def _mean(values: Sequence[float]) -> float:
    if len(values) == 0:
        return 0.0
    return float(np.mean(np.asarray(values, dtype=np.float64)))


def trend_windows(
    base_fees: Sequence[float], window: int = DEFAULT_THRESHOLDS.trend_window
) -> Tuple[Sequence[float], Sequence[float]]:
    """Split ``base_fees`` into ``(previous, recent)`` trailing windows."""
    n = len(base_fees)
    split = max(0, n - window)
    recent = base_fees[split:]
    previous = base_fees[max(0, n - 2 * window) : split]
    return previous, recent


def percent_change(
    base_fees: Sequence[float], window: int = DEFAULT_THRESHOLDS.trend_window
) -> float:
    """Percent change of the recent base-fee average over the previous one."""
    previous, recent = trend_windows(base_fees, window)
    avg_recent = _mean(recent)
    avg_previous = _mean(previous) if len(previous) else avg_recent
    if avg_previous > 0:
        return (avg_recent - avg_previous) / avg_previous * 100
    return 0.0


def classify_trend(change: float, thresholds: Thresholds = DEFAULT_THRESHOLDS) -> Trend:
    if change > thresholds.trend_band:
        return Trend.RISING
    if change < -thresholds.trend_band:
        return Trend.FALLING
    return Trend.FLAT


def fullness(
    utilization: Sequence[float], window: int = DEFAULT_THRESHOLDS.fullness_window
) -> float:
    """Mean of the trailing ``window`` utilisation ratios."""
    return _mean(utilization[-window:] if window else ())


def classify_congestion(
    fill: float,
    dispersion: float,
    trend: Trend,
    change: float,
    thresholds: Thresholds = DEFAULT_THRESHOLDS,
) -> Congestion:
    """Classify congestion; any single extreme signal is enough."""
    if (
        fill > thresholds.full
        or dispersion > thresholds.dispersion
        or (trend is Trend.RISING and change > thresholds.sharp_rise)
    ):
        return Congestion.CONGESTED
    if fill >= thresholds.choppy:
        return Congestion.CHOPPY
    return Congestion.FAVORABLE


def _row(base_fee: float, tip: float, headroom: float) -> FeeRow:
    return FeeRow(
        tip=round_half_up(tip, FEE_PLACES),
        max_fee=round_half_up(headroom * base_fee + tip, FEE_PLACES),
    )


def analyze(
    samples: NormalizedSamples, thresholds: Thresholds = DEFAULT_THRESHOLDS
) -> Summary:
    """Return the fee :class:`Summary` for ``samples``."""
    base_fees = samples.base_fees
    current = base_fees[-1] if base_fees else 0.0

    change = percent_change(base_fees, thresholds.trend_window)
    trend = classify_trend(change, thresholds)

    p10, p25, p50, p75, p90 = (median(col) for col in samples.priority_fees)
    dispersion = p90 - p50
    fill = fullness(samples.utilization, thresholds.fullness_window)
    congestion = classify_congestion(fill, dispersion, trend, change, thresholds)

    next_tip = p90 if congestion is Congestion.CONGESTED else p75
    rows = FeeRows(
        next=_row(current, next_tip, thresholds.headroom),
        mid=_row(current, p50, thresholds.headroom),
        bargain=_row(current, p25, thresholds.headroom),
    )

    summary = Summary(
        current_base_fee=round_half_up(current, FEE_PLACES),
        base_fees=tuple(base_fees),
        trend=trend,
        percent_change=round_half_up(change, PERCENT_PLACES),
        congestion=congestion,
        fullness=round_half_up(fill, FULLNESS_PLACES),
        dispersion=round_half_up(dispersion, FEE_PLACES),
        tips=TipBands(
            p10=round_half_up(p10, FEE_PLACES),
            p25=round_half_up(p25, FEE_PLACES),
            p50=round_half_up(p50, FEE_PLACES),
            p75=round_half_up(p75, FEE_PLACES),
            p90=round_half_up(p90, FEE_PLACES),
        ),
        rows=rows,
    )

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "base_fee=%s trend=%s change=%.2f fullness=%.4f dispersion=%s congestion=%s",
            current,
            trend.value,
            change,
            fill,
            dispersion,
            congestion.value,
        )
    return summary
