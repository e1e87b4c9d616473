"""Command line entry point.

``gastrax --once`` prints one fee summary as JSON and exits; without it the
HTTP API is served with a background poller refreshing the summary.
"""

from __future__ import annotations

import asyncio
import json
import logging
import sys
from typing import List, Optional

import uvicorn

from .display import badge, format_gwei, format_percent, trend_color
from .rpc import FeeHistoryClient
from .server import create_app
from .service import SummaryStore, refresh_once
from .utils import GasConfig, parse_args


async def _run_once(cfg: GasConfig) -> int:
    store = SummaryStore()
    async with FeeHistoryClient(cfg.rpc_http, timeout=cfg.timeout) as client:
        error = await refresh_once(client, store, cfg.block_count)
    if error is not None or store.summary is None:
        print(error, file=sys.stderr)
        return 1
    summary = store.summary
    data = summary.to_dict()
    text, color = badge(summary.current_base_fee)
    data["badge"] = {"text": text, "color": color}
    data["display"] = {
        "baseFee": format_gwei(summary.current_base_fee),
        "fullness": format_percent(summary.fullness),
        "trendColor": trend_color(summary.trend),
    }
    print(json.dumps(data, indent=2))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    cfg = GasConfig.from_args(parse_args(argv))
    logging.basicConfig(level=getattr(logging, cfg.log_level.upper(), logging.INFO))

    if cfg.once:
        return asyncio.run(_run_once(cfg))

    store = SummaryStore()
    client = FeeHistoryClient(cfg.rpc_http, timeout=cfg.timeout)
    app = create_app(cfg, store, client)
    uvicorn.run(app, host=cfg.host, port=cfg.port)
    return 0


if __name__ == "__main__":
    sys.exit(main())
