"""Value types shared by the parser and the analytics engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Tuple

from ..types import Congestion, Trend

PERCENTILES: Tuple[int, ...] = (10, 25, 50, 75, 90)


@dataclass(frozen=True)
class NormalizedSamples:
    """Fee-history samples converted to gwei.

    ``priority_fees`` always holds one column per entry of ``PERCENTILES``
    and every column has the same length, since reward rows are admitted
    or rejected as a whole.
    """

    base_fees: Tuple[float, ...] = ()
    utilization: Tuple[float, ...] = ()
    priority_fees: Tuple[Tuple[float, ...], ...] = field(
        default_factory=lambda: tuple(() for _ in PERCENTILES)
    )


@dataclass(frozen=True)
class Thresholds:
    """Tunable classification constants.

    ``dispersion`` is an absolute gwei spread and does not scale with the
    fee level of the chain being sampled.
    """

    trend_band: float = 5.0
    sharp_rise: float = 15.0
    full: float = 0.95
    choppy: float = 0.85
    dispersion: float = 5.0
    trend_window: int = 5
    fullness_window: int = 10
    headroom: float = 2.0


DEFAULT_THRESHOLDS = Thresholds()


@dataclass(frozen=True)
class TipBands:
    p10: float
    p25: float
    p50: float
    p75: float
    p90: float


@dataclass(frozen=True)
class FeeRow:
    tip: float
    max_fee: float

    def to_dict(self) -> Dict[str, float]:
        return {"tip": self.tip, "maxFee": self.max_fee}


@dataclass(frozen=True)
class FeeRows:
    next: FeeRow
    mid: FeeRow
    bargain: FeeRow

    def to_dict(self) -> Dict[str, Dict[str, float]]:
        return {
            "next": self.next.to_dict(),
            "mid": self.mid.to_dict(),
            "bargain": self.bargain.to_dict(),
        }


@dataclass(frozen=True)
class Summary:
    """Result of one analysis run. All values are already rounded."""

    current_base_fee: float
    base_fees: Tuple[float, ...]
    trend: Trend
    percent_change: float
    congestion: Congestion
    fullness: float
    dispersion: float
    tips: TipBands
    rows: FeeRows

    def to_dict(self) -> Dict[str, Any]:
        """Return the summary using the camelCase names of the JSON API."""
        return {
            "currentBaseFee": self.current_base_fee,
            "baseFees": list(self.base_fees),
            "trend": self.trend.value,
            "pctChange": self.percent_change,
            "congestion": self.congestion.value,
            "fullness": self.fullness,
            "dispersion": self.dispersion,
            "tips": {
                "p10": self.tips.p10,
                "p25": self.tips.p25,
                "p50": self.tips.p50,
                "p75": self.tips.p75,
                "p90": self.tips.p90,
            },
            "rows": self.rows.to_dict(),
        }
