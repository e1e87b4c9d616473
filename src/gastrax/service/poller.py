"""Background polling of fee history."""

from __future__ import annotations

import asyncio
import logging
import time
from typing import Optional

import httpx
from prometheus_client import Counter, Gauge, Summary

from ..engine import DEFAULT_THRESHOLDS, MalformedInputError, Thresholds, analyze, parse
from ..rpc import FeeHistoryClient, RpcError, RpcTimeoutError
from .store import SummaryStore

logger = logging.getLogger(__name__)

analysis_latency_us = Summary(
    "fee_analysis_latency_us", "fee-history parse and analysis latency in microseconds"
)
base_fee_gauge = Gauge("fee_current_base_fee_gwei", "latest base fee in gwei")
fullness_gauge = Gauge("fee_block_fullness", "mean gas utilisation over the trailing window")
poll_failures = Counter("fee_poll_failures", "fee-history refreshes that failed")


async def refresh_once(
    client: FeeHistoryClient,
    store: SummaryStore,
    block_count: int = 10,
    thresholds: Thresholds = DEFAULT_THRESHOLDS,
) -> Optional[str]:
    """Fetch, analyse and store one summary.

    Returns the error message on failure, ``None`` on success.  Upstream
    failures are recorded in ``store`` rather than raised.
    """

    try:
        raw = await client.fee_history(block_count)
        start = time.perf_counter()
        summary = analyze(parse(raw), thresholds)
        analysis_latency_us.observe((time.perf_counter() - start) * 1e6)
    except (RpcError, MalformedInputError, httpx.HTTPError) as exc:
        message = str(exc) if isinstance(exc, RpcTimeoutError) else f"Error: {exc}"
        logger.warning("fee refresh failed: %s", exc)
        poll_failures.inc()
        store.set_error(message)
        return message
    store.update(summary)
    base_fee_gauge.set(summary.current_base_fee)
    fullness_gauge.set(summary.fullness)
    return None


async def _poll_loop(
    client: FeeHistoryClient,
    store: SummaryStore,
    interval: float,
    block_count: int,
    thresholds: Thresholds,
) -> None:
    while True:
        try:
            await refresh_once(client, store, block_count, thresholds)
        except Exception as exc:
            logger.exception("unexpected fee refresh failure")
            poll_failures.inc()
            store.set_error(f"Error: {exc}")
        await asyncio.sleep(interval)


def start_fee_poller(
    client: FeeHistoryClient,
    store: SummaryStore,
    interval: float = 30.0,
    block_count: int = 10,
    thresholds: Thresholds = DEFAULT_THRESHOLDS,
) -> asyncio.Task:
    """Start background task refreshing ``store`` every ``interval`` seconds."""
    loop = asyncio.get_running_loop()
    return loop.create_task(_poll_loop(client, store, interval, block_count, thresholds))
