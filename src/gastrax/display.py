"""Display values derived from a fee summary.

These helpers only compute strings and colours; painting a toolbar badge or
rendering markup is left to whichever frontend consumes them.
"""

from __future__ import annotations

import math
from typing import Tuple

from .types import Trend

RED = "#dc2626"
AMBER = "#f59e0b"
BLUE = "#3b82f6"
GREEN = "#22c55e"
GREY = "#71717a"

PLACEHOLDER_BADGE: Tuple[str, str] = ("...", GREY)

TREND_COLORS = {
    Trend.RISING: "#f87171",
    Trend.FLAT: "#a1a1aa",
    Trend.FALLING: "#4ade80",
}


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def badge_text(gwei: float) -> str:
    """Compact base-fee text that fits in a four character badge."""
    if gwei >= 100:
        return str(_round_half_up(gwei))
    if gwei >= 10:
        return f"{gwei:.1f}"
    return f"{gwei:.3f}"


def badge_color(gwei: float) -> str:
    if gwei >= 50:
        return RED
    if gwei >= 20:
        return AMBER
    if gwei >= 5:
        return BLUE
    return GREEN


def badge(gwei: float) -> Tuple[str, str]:
    """Return ``(text, colour)`` for a base fee in gwei."""
    return badge_text(gwei), badge_color(gwei)


def format_gwei(value: float) -> str:
    """Format a gwei amount with enough precision for sub-gwei chains."""
    if value == 0:
        return "0.000"
    if value >= 0.001:
        return f"{value:.3f}"
    if value >= 0.00001:
        return f"{value:.5f}"
    return f"{value:.7f}"


def format_percent(ratio: float) -> str:
    return f"{ratio * 100:.1f}%"


def trend_color(trend: Trend) -> str:
    return TREND_COLORS.get(trend, TREND_COLORS[Trend.FLAT])
