"""Shared enumerations."""

from __future__ import annotations

from enum import Enum


class Trend(str, Enum):
    RISING = "rising"
    FALLING = "falling"
    FLAT = "flat"


class Congestion(str, Enum):
    FAVORABLE = "FAVORABLE"
    CHOPPY = "CHOPPY"
    CONGESTED = "CONGESTED"
