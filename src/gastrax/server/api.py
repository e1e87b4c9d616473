"""FastAPI application publishing the latest fee summary.

Endpoints:
* ``GET /health`` – service liveness
* ``GET /summary`` – latest fee summary (503 while unavailable)
* ``GET /badge`` – badge text and colour for the current base fee
* ``GET /metrics`` – Prometheus metrics
"""

from __future__ import annotations

import asyncio
import contextlib
import logging
from typing import Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from prometheus_fastapi_instrumentator import Instrumentator
from pydantic import BaseModel

from ..display import PLACEHOLDER_BADGE, badge
from ..rpc import FeeHistoryClient
from ..service import SummaryStore, start_fee_poller
from ..utils import GasConfig

logger = logging.getLogger(__name__)


class BadgeResponse(BaseModel):
    text: str
    color: str


def create_app(
    cfg: GasConfig,
    store: SummaryStore,
    client: Optional[FeeHistoryClient] = None,
) -> FastAPI:
    """Return the API app; a poller is started on startup when ``client`` is set."""

    app = FastAPI(title="gastrax API")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET"],
        allow_headers=["*"],
    )
    Instrumentator().instrument(app).expose(app, endpoint="/metrics", include_in_schema=False)
    app.state.store = store
    poller_task: Optional[asyncio.Task] = None

    @app.on_event("startup")
    async def start_poller() -> None:
        nonlocal poller_task
        if client is None:
            return
        logger.info("polling %s every %ss", cfg.rpc_http, cfg.interval)
        poller_task = start_fee_poller(
            client, store, interval=cfg.interval, block_count=cfg.block_count
        )

    @app.on_event("shutdown")
    async def stop_poller() -> None:
        if poller_task is not None:
            poller_task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await poller_task
        if client is not None:
            await client.aclose()

    @app.get("/health")
    async def health() -> dict:
        return {"status": "ok", "age": store.age()}

    @app.get("/summary")
    async def summary() -> dict:
        if store.summary is None:
            raise HTTPException(status_code=503, detail=store.error or "summary unavailable")
        data = store.summary.to_dict()
        data["updatedAt"] = store.updated_at
        return data

    @app.get("/badge", response_model=BadgeResponse)
    async def badge_state() -> BadgeResponse:
        if store.summary is None:
            text, color = PLACEHOLDER_BADGE
        else:
            text, color = badge(store.summary.current_base_fee)
        return BadgeResponse(text=text, color=color)

    return app
