"""Normalisation of raw ``eth_feeHistory`` results.

The RPC result carries base fees and per-percentile rewards in wei, encoded
as hex strings (``"0x3b9aca00"``) or occasionally as decimal strings or
plain integers depending on the provider.  Values are turned into Python
integers first and only then divided down to gwei so that large wei
amounts never pass through a float before the unit conversion.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any, List

from ._types import PERCENTILES, NormalizedSamples

logger = logging.getLogger(__name__)

WEI_PER_GWEI = 10**9


class MalformedInputError(ValueError):
    """Raised when a fee-history sample set is missing required fields."""


def _is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def _to_wei(value: Any) -> int:
    if isinstance(value, bool):
        raise MalformedInputError(f"invalid fee value: {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not value.is_integer():
            raise MalformedInputError(f"fractional wei value: {value!r}")
        return int(value)
    if isinstance(value, str):
        text = value.strip()
        try:
            if text[:2].lower() == "0x":
                return int(text[2:], 16)
            return int(text, 10)
        except ValueError:
            raise MalformedInputError(f"invalid fee value: {value!r}") from None
    raise MalformedInputError(f"invalid fee value: {value!r}")


def wei_to_gwei(value: Any) -> float:
    """Convert a wei amount (int, hex or decimal string) to gwei."""
    # int / int true division rounds once, after the exact quotient
    try:
        return _to_wei(value) / WEI_PER_GWEI
    except OverflowError:
        raise MalformedInputError(f"fee value out of range: {value!r}") from None


def _require(raw: Mapping, key: str) -> Sequence:
    value = raw.get(key)
    if value is None:
        raise MalformedInputError(f"Malformed eth_feeHistory response: missing {key}")
    if not _is_sequence(value):
        raise MalformedInputError(f"Malformed eth_feeHistory response: {key} is not a list")
    return value


def parse(raw: Mapping) -> NormalizedSamples:
    """Return :class:`NormalizedSamples` for a raw fee-history result.

    Parameters
    ----------
    raw:
        Mapping with ``baseFeePerGas``, ``reward`` and ``gasUsedRatio``
        members as returned by ``eth_feeHistory``.

    Reward rows with fewer than five entries are skipped entirely so that
    every percentile column keeps the same number of samples.
    """

    if not isinstance(raw, Mapping):
        raise MalformedInputError("Malformed eth_feeHistory response")
    base_raw = _require(raw, "baseFeePerGas")
    reward_raw = _require(raw, "reward")
    ratio_raw = _require(raw, "gasUsedRatio")

    base_fees = tuple(wei_to_gwei(v) for v in base_raw)

    width = len(PERCENTILES)
    columns: List[List[float]] = [[] for _ in PERCENTILES]
    for row in reward_raw:
        if not _is_sequence(row) or len(row) < width:
            continue
        converted = [wei_to_gwei(v) for v in row[:width]]
        for col, fee in zip(columns, converted):
            col.append(fee)

    try:
        utilization = tuple(float(r) for r in ratio_raw)
    except (TypeError, ValueError, OverflowError):
        raise MalformedInputError("Malformed eth_feeHistory response: bad gasUsedRatio") from None

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "parsed %d base fees, %d/%d reward rows",
            len(base_fees),
            len(columns[0]),
            len(reward_raw),
        )
    return NormalizedSamples(
        base_fees=base_fees,
        utilization=utilization,
        priority_fees=tuple(tuple(c) for c in columns),
    )
